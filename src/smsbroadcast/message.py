"""
Defines the outgoing message draft and the multipart split rules.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

import math

from smsbroadcast.exceptions import ValidationError


MAX_SENDER_LENGTH = 11
SINGLE_MESSAGE_LENGTH = 160
MULTIPART_SEGMENT_LENGTH = 153
MAX_SPLIT = 7


def derive_split_count(message, split_policy=None):
    """
    Return the number of parts the gateway may split `message` into.

    Messages of up to 160 characters always go out as a single SMS.
    Longer ones use `split_policy` when given, otherwise one part per
    153 characters. Raises ValidationError when the count falls outside
    1 to 7.
    """
    length = len(message)
    if length <= SINGLE_MESSAGE_LENGTH:
        return 1
    if split_policy is not None:
        split_count = split_policy
    else:
        split_count = math.ceil(length / MULTIPART_SEGMENT_LENGTH)
    if not 1 <= split_count <= MAX_SPLIT:
        raise ValidationError(
            'message too long for split policy '
            f'({length} characters, {split_count} parts, '
            f'maximum {MAX_SPLIT})',
            length=length,
            split_count=split_count,
        )
    return split_count


def unique_recipients(recipients):
    """
    Drop repeated numbers, keeping the order of first occurrence.
    """
    return list(dict.fromkeys(recipients))


class OutgoingMessage:
    """
    Draft of an SMS that has not been sent yet.

    The setters return the draft itself so calls can be chained:

        draft = (
            OutgoingMessage()
            .add_recipient('0400000000')
            .set_sender('MyCompany')
            .set_message('Hello')
        )

    Args:
        recipients (list, optional): Phone numbers to send to
        sender (str, optional): Sender id shown to recipients, at most
            11 characters. Empty lets the gateway pick its default.
        message (str, optional): Body of the SMS
        reference (str, optional): Caller's tracking tag, passed
            through untouched
        split_policy (int, optional): Explicit maximum number of parts
    """

    def __init__(self, recipients=None, sender='', message='',
                 reference=None, split_policy=None):
        self.recipients = list(recipients or [])
        self.sender = sender
        self.message = message
        self.reference = reference
        self.split_policy = split_policy

    def __repr__(self):
        return (
            f'<OutgoingMessage recipients={self.recipients!r} '
            f'sender={self.sender!r} length={len(self.message)}>'
        )

    def add_recipient(self, number):
        self.recipients.append(number)
        return self

    def set_sender(self, sender):
        self.sender = sender
        return self

    def set_message(self, message):
        self.message = message
        return self

    def set_reference(self, reference):
        self.reference = reference
        return self

    def set_split_policy(self, split_policy):
        self.split_policy = split_policy
        return self

    def validate(self):
        """
        Check the draft and return the split count to use.

        Only the first broken rule is reported.
        """
        if not self.recipients:
            raise ValidationError('no recipients')
        if len(self.sender or '') > MAX_SENDER_LENGTH:
            raise ValidationError(
                f'sender too long ({len(self.sender)} characters, '
                f'maximum {MAX_SENDER_LENGTH})'
            )
        return derive_split_count(self.message, self.split_policy)

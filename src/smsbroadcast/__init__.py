"""
Defines functions used to send SMS messages using SMS Broadcast.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

import os

from smsbroadcast.client import GatewayClient
from smsbroadcast.config import get as get_config
from smsbroadcast.config import is_set as is_config_set
from smsbroadcast.exceptions import (
    ConfigurationError,
    GatewayError,
    ProtocolError,
    SmsBroadcastError,
    TransportError,
    ValidationError,
)
from smsbroadcast.message import OutgoingMessage
from smsbroadcast.protocol import DeliveryResult
from smsbroadcast.transports import get_transport


def get_client(transport=None, username=None, password=None, **kwargs):
    """
    Build a GatewayClient from the settings registry.

    Credentials are looked up in order of priority:
    1. The username and password arguments
    2. The USERNAME and PASSWORD settings
    3. SMSBROADCAST_USERNAME and SMSBROADCAST_PASSWORD environment
       variables
    """
    username = (
        username
        or get_config('USERNAME')
        or os.environ.get('SMSBROADCAST_USERNAME', '')
    )
    password = (
        password
        or get_config('PASSWORD')
        or os.environ.get('SMSBROADCAST_PASSWORD', '')
    )
    if transport is None or isinstance(transport, str):
        transport = get_transport(transport)
    return GatewayClient(username, password, transport=transport, **kwargs)


def _build_message(message, recipients, sender, reference, split_policy):
    if isinstance(recipients, str):
        recipients = [recipients]
    return OutgoingMessage(
        recipients=recipients,
        sender=sender,
        message=message,
        reference=reference,
        split_policy=split_policy,
    )


def send_sms(
    message,
    recipients,
    sender='',
    reference=None,
    split_policy=None,
    client=None
):
    """
    Send a message to one or more numbers.

    Args:
        message (str): The message to send
        recipients (str or list): The phone number(s) to send to
        sender (str): Sender id, at most 11 characters
        reference (str or None): Tracking tag echoed by the gateway
        split_policy (int or None): Explicit maximum number of parts
        client (GatewayClient or None): the client that sends messages
    """
    sms = client or get_client()
    draft = _build_message(
        message, recipients, sender, reference, split_policy
    )
    return sms.send(draft)


async def send_async_sms(
    message,
    recipients,
    sender='',
    reference=None,
    split_policy=None,
    client=None
):
    """
    Send a message asynchronously.

    Args:
        message (str): The message to send
        recipients (str or list): The phone number(s) to send to
        sender (str): Sender id, at most 11 characters
        reference (str or None): Tracking tag echoed by the gateway
        split_policy (int or None): Explicit maximum number of parts
        client (GatewayClient or None): the client that sends messages.
            Without one, the TRANSPORT setting is used, falling back to
            the async_http transport when it is not set.
    """
    transport = None if is_config_set('TRANSPORT') else 'async_http'
    sms = client or get_client(transport)
    draft = _build_message(
        message, recipients, sender, reference, split_policy
    )
    return await sms.send_async(draft)


def check_balance(client=None):
    sms = client or get_client()
    return sms.check_balance()


__all__ = [
    'ConfigurationError',
    'DeliveryResult',
    'GatewayClient',
    'GatewayError',
    'OutgoingMessage',
    'ProtocolError',
    'SmsBroadcastError',
    'TransportError',
    'ValidationError',
    'check_balance',
    'get_client',
    'send_async_sms',
    'send_sms',
]

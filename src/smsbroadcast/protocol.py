"""
Encodes requests for, and parses responses from, the SMS Broadcast API.

The gateway speaks a small line-oriented text protocol. A send request
is answered with one `STATUS:RECIPIENT:DETAIL` line per recipient, a
balance request with a single `STATUS:VALUE` line, and any request the
gateway rejects outright with `ERROR:REASON`.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from smsbroadcast.exceptions import GatewayError, ProtocolError


API_ENDPOINT = 'https://www.smsbroadcast.com.au/api-adv.php'

STATUS_OK = 'OK'
STATUS_BAD = 'BAD'
STATUS_ERROR = 'ERROR'


@dataclass(frozen=True)
class DeliveryResult:
    status: str
    recipient: str
    detail: str

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def encode_form(fields) -> str:
    """
    Percent-encode an ordered mapping of fields into a form body.

    List values (the recipients) are joined with commas.
    """
    pairs = []
    for key, value in fields.items():
        if isinstance(value, (list, tuple)):
            value = ','.join(value)
        elif value is None:
            value = ''
        pairs.append(f'{key}={quote(str(value), safe="")}')
    return '&'.join(pairs)


def _split_error(text):
    """
    Return the reason of an `ERROR:` response, or None.
    """
    status, _, reason = text.strip().partition(':')
    if status.strip() == STATUS_ERROR:
        return reason.strip()
    return None


def parse_send_response(text) -> list[DeliveryResult]:
    reason = _split_error(text)
    if reason is not None:
        raise GatewayError(reason)

    results = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split(':')
        if len(fields) != 3:
            raise ProtocolError(
                f'Expected STATUS:RECIPIENT:DETAIL, got {line!r}',
                line=line,
            )
        status, recipient, detail = (field.strip() for field in fields)
        results.append(DeliveryResult(status, recipient, detail))

    if not results:
        raise ProtocolError('Gateway returned an empty response', line=text)
    return results


def parse_balance_response(text) -> int:
    reason = _split_error(text)
    if reason is not None:
        raise GatewayError(reason)

    line = text.strip()
    fields = line.split(':')
    if len(fields) != 2:
        raise ProtocolError(f'Expected STATUS:VALUE, got {line!r}', line=line)
    value = fields[1].strip()
    if not re.fullmatch(r'-?[0-9]+', value):
        raise ProtocolError(f'Balance {value!r} is not a number', line=line)
    return int(value)

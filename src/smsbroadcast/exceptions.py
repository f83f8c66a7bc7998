"""
Defines the exceptions raised while talking to the SMS Broadcast API.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""


class SmsBroadcastError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SmsBroadcastError):
    """Raised when API credentials are missing."""


class ValidationError(SmsBroadcastError):
    """
    Raised when the outgoing message draft cannot be sent as it is.

    When the multipart rule is violated, `length` and `split_count`
    hold the character count and the split count that was rejected.
    """

    def __init__(self, message, length=None, split_count=None):
        super().__init__(message)
        self.length = length
        self.split_count = split_count


class TransportError(SmsBroadcastError):
    """Raised when the HTTP exchange with the gateway fails."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class GatewayError(SmsBroadcastError):
    """Raised when the gateway answers with an ERROR line."""

    def __init__(self, detail):
        super().__init__(f'There was an error with this request: {detail}')
        self.detail = detail


class ProtocolError(SmsBroadcastError):
    """Raised when a gateway response does not follow the expected grammar."""

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line

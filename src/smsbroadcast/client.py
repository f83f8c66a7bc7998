"""
Defines the client that sends SMS messages through SMS Broadcast.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

import inspect
import logging

from smsbroadcast import protocol
from smsbroadcast.config import get as get_config
from smsbroadcast.exceptions import ConfigurationError, TransportError
from smsbroadcast.message import OutgoingMessage, unique_recipients
from smsbroadcast.transports import get_transport


logger = logging.getLogger(__name__)


class GatewayClient:
    """
    Client for the SMS Broadcast HTTP API.

    The client owns a draft message which is filled in and then sent:

        client = GatewayClient('username', 'password')
        client.add_recipient('0400000000')
        client.draft.set_sender('SMS API').set_message('Hello')
        results = client.send()

    `send()` returns one DeliveryResult per recipient. Recipients the
    gateway refused are reported with a `BAD` status rather than raised.

    A draft must not be changed while a send is in flight; the client
    does no locking of its own.

    Args:
        username (str): API account username
        password (str): API account password
        transport (object, optional): Object with a
            `post_form(url, body)` method. Defaults to the transport
            named by the TRANSPORT setting.
        endpoint (str, optional): API endpoint URL
        forward_maxsplit (bool, optional): Whether to send the
            `maxsplit` field. Defaults to the FORWARD_MAXSPLIT setting.
    """

    def __init__(self, username, password, transport=None, endpoint=None,
                 forward_maxsplit=None):
        self.set_authentication(username, password)
        self.transport = transport or get_transport()
        self.endpoint = endpoint or get_config('API_ENDPOINT')
        if forward_maxsplit is None:
            forward_maxsplit = get_config('FORWARD_MAXSPLIT')
        self.forward_maxsplit = forward_maxsplit
        self.draft = OutgoingMessage()

    def set_authentication(self, username, password):
        self._username = username
        self._password = password

    def add_recipient(self, number):
        """
        Add a phone number to the draft. Local (0...), international
        (61...) and bare subscriber numbers are all accepted.
        """
        self.draft.add_recipient(number)
        return self

    def _check_authentication(self):
        if not self._username or not self._password:
            raise ConfigurationError('API username or password not specified.')

    def _auth_fields(self):
        return {
            'username': self._username,
            'password': self._password,
        }

    def build_send_request(self, draft=None):
        """
        Validate a draft and return the encoded form body for it.
        """
        draft = draft or self.draft
        self._check_authentication()
        split_count = draft.validate()
        fields = self._auth_fields()
        fields.update({
            'to': unique_recipients(draft.recipients),
            'from': draft.sender,
            'message': draft.message,
            'ref': draft.reference,
        })
        if self.forward_maxsplit:
            fields['maxsplit'] = split_count
        return protocol.encode_form(fields)

    def build_balance_request(self):
        self._check_authentication()
        fields = self._auth_fields()
        fields['action'] = 'balance'
        return protocol.encode_form(fields)

    def _log_request(self, body):
        if logger.isEnabledFor(logging.DEBUG):
            masked = body.replace(
                protocol.encode_form({'password': self._password}),
                'password=***',
            )
            logger.debug(f'POST {self.endpoint}: {masked}')

    def _post(self, body):
        self._log_request(body)
        post_form = getattr(
            self.transport,
            'post_form_sync',
            self.transport.post_form
        )
        try:
            return post_form(self.endpoint, body)
        except TransportError as e:
            logger.error(f'Failed to reach SMS Broadcast: {e}')
            raise

    async def _post_async(self, body):
        self._log_request(body)
        try:
            text = self.transport.post_form(self.endpoint, body)
            if inspect.isawaitable(text):
                text = await text
            return text
        except TransportError as e:
            logger.error(f'Failed to reach SMS Broadcast: {e}')
            raise

    def _finish_send(self, draft, text):
        results = protocol.parse_send_response(text)
        failed = [result for result in results if not result.ok]
        logger.info(
            f'Message submitted to {len(results)} recipient(s), '
            f'{len(failed)} rejected.'
        )
        if draft is self.draft:
            self.draft = OutgoingMessage()
        return results

    def send(self, draft=None):
        """
        Send the draft (or the given OutgoingMessage).

        Returns:
            list: DeliveryResult for every line the gateway returned

        Raises:
            ConfigurationError: If credentials are missing
            ValidationError: If the draft cannot be sent
            TransportError: If the HTTP exchange fails
            GatewayError: If the gateway rejects the request
            ProtocolError: If the response cannot be parsed
        """
        draft = draft or self.draft
        body = self.build_send_request(draft)
        return self._finish_send(draft, self._post(body))

    async def send_async(self, draft=None):
        """
        Same as send(). Async transports are awaited; a sync transport
        is called directly and blocks the event loop while it runs.
        """
        draft = draft or self.draft
        body = self.build_send_request(draft)
        return self._finish_send(draft, await self._post_async(body))

    def check_balance(self):
        """
        Return the number of SMS credits remaining on the account.
        """
        body = self.build_balance_request()
        balance = protocol.parse_balance_response(self._post(body))
        logger.info(f'Account balance is {balance} credits.')
        return balance

    async def check_balance_async(self):
        body = self.build_balance_request()
        balance = protocol.parse_balance_response(
            await self._post_async(body)
        )
        logger.info(f'Account balance is {balance} credits.')
        return balance

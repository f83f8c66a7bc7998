"""
Defines a transport that posts form data to the gateway using requests.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

import requests

from smsbroadcast.config import get as get_config
from smsbroadcast.exceptions import TransportError


FORM_HEADERS = {
    'Content-Type': 'application/x-www-form-urlencoded',
}


class HttpTransport:

    def __init__(self, timeout=None, raise_for_status=True, session=None,
                 **kwargs):
        """
        Stores request settings. The requests session is created on
        first use unless one is passed in.
        """
        self.timeout = timeout or get_config('TIMEOUT')
        self.raise_for_status = raise_for_status
        self._session = session

    @property
    def session(self):
        """
        Lazy initialization of the requests session.
        """
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def post_form(self, url, body):
        """
        POST an encoded form body and return the response text.
        """
        try:
            response = self.session.post(
                url,
                data=body.encode('utf-8'),
                headers=FORM_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as error:
            raise TransportError(
                f'Request to {url} failed: {error}'
            ) from error
        if self.raise_for_status and not response.ok:
            raise TransportError(
                f'Gateway returned HTTP {response.status_code}',
                status_code=response.status_code,
            )
        return response.text

    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None

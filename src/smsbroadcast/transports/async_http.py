"""
Defines a transport that posts form data to the gateway asynchronously.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

from __future__ import annotations

import asyncio

import httpx

from smsbroadcast.config import get as get_config
from smsbroadcast.exceptions import TransportError
from smsbroadcast.transports.http import FORM_HEADERS


class AsyncHttpTransport:
    """
    Async transport that posts to the gateway using httpx.

    `post_form` is an 'async def' method, for use with
    GatewayClient.send_async() and check_balance_async().
    """

    def __init__(self, timeout=None, raise_for_status=True,
                 http_transport=None, **kwargs):
        """
        Initialize important values. `http_transport` is handed to
        httpx.AsyncClient, which lets tests plug in httpx.MockTransport.
        """
        self.timeout = timeout or get_config('TIMEOUT')
        self.raise_for_status = raise_for_status
        self._http_transport = http_transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._http_transport,
        )

    async def post_form(self, url: str, body: str) -> str:
        """
        POST an encoded form body and return the response text.
        """
        try:
            async with self._create_client() as client:
                response = await client.post(
                    url,
                    content=body.encode('utf-8'),
                    headers=FORM_HEADERS,
                )
        except httpx.HTTPError as error:
            raise TransportError(
                f'Request to {url} failed: {error}'
            ) from error
        if self.raise_for_status and not response.is_success:
            raise TransportError(
                f'Gateway returned HTTP {response.status_code}',
                status_code=response.status_code,
            )
        return response.text

    def post_form_sync(self, url, body):
        """
        Run the async post_form from synchronous code.
        """
        return asyncio.run(self.post_form(url, body))

"""
Defines a transport that keeps requests in memory instead of posting
them. Used mainly for unit testing an application.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

from collections import deque
from urllib.parse import parse_qs

from smsbroadcast import transports


class Request:

    def __init__(self, url, body):
        self.url = url
        self.body = body
        self.fields = {
            key: values[0]
            for key, values in parse_qs(body, keep_blank_values=True).items()
        }


class Transport:

    def __init__(self, responses=None, **kwargs):
        """
        Stores all posted requests in a list.

        `responses` is a list of raw response bodies returned in order.
        Once it runs out, every recipient is answered with an OK line.
        """
        if not hasattr(transports, 'outbox'):
            transports.outbox = []
        self.responses = deque(responses or [])

    def queue_response(self, text):
        self.responses.append(text)

    def post_form(self, url, body):
        """
        Redirect request to mock outbox list.
        """
        request = Request(url, body)
        transports.outbox.append(request)
        if self.responses:
            return self.responses.popleft()
        if request.fields.get('action') == 'balance':
            return 'OK:0'
        numbers = request.fields.get('to', '').split(',')
        return '\n'.join(
            f'OK:{number}:{index}'
            for index, number in enumerate(numbers, start=1)
        )

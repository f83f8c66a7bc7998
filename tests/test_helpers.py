import asyncio
from types import SimpleNamespace

import pytest

import smsbroadcast
from smsbroadcast import config, transports
from smsbroadcast.exceptions import ConfigurationError
from smsbroadcast.flask_ext import SmsBroadcast
from smsbroadcast.transports.locmem import Transport


def test_get_client_reads_credentials_from_config():
    config.set(USERNAME='user', PASSWORD='secret', TRANSPORT='locmem')

    client = smsbroadcast.get_client()

    assert isinstance(client.transport, Transport)
    assert client.check_balance() == 0
    assert transports.outbox[0].fields['username'] == 'user'


def test_get_client_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv('SMSBROADCAST_USERNAME', 'env-user')
    monkeypatch.setenv('SMSBROADCAST_PASSWORD', 'env-secret')

    client = smsbroadcast.get_client('locmem')
    client.check_balance()

    assert transports.outbox[0].fields['username'] == 'env-user'
    assert transports.outbox[0].fields['password'] == 'env-secret'


def test_get_client_without_credentials_fails_on_request():
    client = smsbroadcast.get_client('locmem')

    with pytest.raises(ConfigurationError):
        client.check_balance()


def test_send_sms_accepts_a_single_number():
    config.set(USERNAME='user', PASSWORD='secret', TRANSPORT='locmem')

    results = smsbroadcast.send_sms('Hello', '0400000000', sender='Shop')

    assert [result.recipient for result in results] == ['0400000000']
    assert transports.outbox[0].fields['from'] == 'Shop'


def test_send_sms_with_explicit_client():
    client = smsbroadcast.GatewayClient('user', 'secret', transport=Transport())

    results = smsbroadcast.send_sms(
        'x' * 400,
        ['0400000000', '0400000000'],
        reference='order-9',
        split_policy=4,
        client=client,
    )

    fields = transports.outbox[0].fields
    assert len(results) == 1
    assert fields['ref'] == 'order-9'
    assert fields['maxsplit'] == '4'


def test_check_balance_helper():
    client = smsbroadcast.GatewayClient(
        'user', 'secret', transport=Transport(responses=['OK:77'])
    )

    assert smsbroadcast.check_balance(client) == 77


@pytest.mark.asyncio
async def test_send_async_sms_with_explicit_client():
    class AsyncLocmem(Transport):
        async def post_form(self, url, body):
            return Transport.post_form(self, url, body)

    client = smsbroadcast.GatewayClient(
        'user', 'secret', transport=AsyncLocmem()
    )

    results = await smsbroadcast.send_async_sms(
        'Hello', ['0400000000'], client=client
    )

    assert results[0].ok


def test_flask_extension_binds_prefixed_config():
    app = SimpleNamespace(config={
        'SMSBROADCAST_USERNAME': 'flask-user',
        'SMSBROADCAST_PASSWORD': 'flask-secret',
        'SMSBROADCAST_TRANSPORT': 'locmem',
        'SECRET_KEY': 'unrelated',
    })

    extension = SmsBroadcast(app)

    assert app.extensions['smsbroadcast'] is extension
    assert SmsBroadcast.get_config('USERNAME') == 'flask-user'
    assert SmsBroadcast.get_config('SECRET_KEY') is None
    client = extension.get_client()
    client.check_balance()
    assert transports.outbox[0].fields['password'] == 'flask-secret'


@pytest.mark.asyncio
async def test_send_async_sms_honours_transport_setting():
    config.set(USERNAME='user', PASSWORD='secret', TRANSPORT='locmem')

    results = await smsbroadcast.send_async_sms('Hello', '0400000000')

    assert [result.recipient for result in results] == ['0400000000']
    assert transports.outbox[0].fields['message'] == 'Hello'


def test_async_helper_defaults_to_async_transport(monkeypatch):
    seen = {}

    def fake_get_client(transport=None, **kwargs):
        seen['transport'] = transport
        return smsbroadcast.GatewayClient('user', 'secret',
                                          transport=Transport())

    monkeypatch.setattr(smsbroadcast, 'get_client', fake_get_client)

    asyncio.run(smsbroadcast.send_async_sms('Hello', '0400000000'))

    assert seen['transport'] == 'async_http'

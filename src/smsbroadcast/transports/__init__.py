from smsbroadcast.config import get as get_config
from smsbroadcast.transports import async_http, http, locmem


transport_classes = {
    'async_http': async_http.AsyncHttpTransport,
    'http': http.HttpTransport,
    'locmem': locmem.Transport,
}


def get_transport(transport=None, **kwargs):
    """
    Load a transport and return an instance of it.
    """
    _transport = transport or get_config('TRANSPORT')
    klass = transport_classes.get(_transport)
    if klass is None:
        raise ValueError(f'Unknown SMS Broadcast transport: {_transport!r}')
    return klass(**kwargs)

"""
Defines a Flask extension for initializing SMS Broadcast configuration
for use in Flask websites.

Copyright (c) 2025 Zachary Young.
All rights reserved.
"""

from smsbroadcast import config as smsbroadcast_config
from smsbroadcast import get_client


CONFIG_PREFIX = 'SMSBROADCAST_'


class SmsBroadcast:
    """
    Flask extension for SMS Broadcast.

    Usage:

        from smsbroadcast.flask_ext import SmsBroadcast
        sms = SmsBroadcast()

        def create_app():
            app = Flask(__name__)
            app.config['SMSBROADCAST_USERNAME'] = 'username'
            app.config['SMSBROADCAST_PASSWORD'] = 'password'
            app.config['SMSBROADCAST_TRANSPORT'] = 'http'
            sms.init_app(app)
            return app

        @app.route("/test-sms")
        def test_sms():
            send_sms("Hello from Flask!", "0400000000")
            return "Message sent!"
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """
        Bind SMS Broadcast configuration values from the Flask app to
        the package's internal configuration registry.
        """
        smsbroadcast_keys = {
            key[len(CONFIG_PREFIX):]: app.config[key]
            for key in app.config
            if key.startswith(CONFIG_PREFIX)
        }
        smsbroadcast_config.load_dict(smsbroadcast_keys)
        if not hasattr(app, 'extensions'):
            app.extensions = {}
        app.extensions['smsbroadcast'] = self

    @staticmethod
    def get_config(key, default=None):
        """
        Read SMS Broadcast config inside view functions.
        """
        return smsbroadcast_config.get(key, default)

    @staticmethod
    def get_client(**kwargs):
        """
        Build a GatewayClient from the bound configuration.
        """
        return get_client(**kwargs)

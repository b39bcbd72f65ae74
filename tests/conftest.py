import sys
import threading
from pathlib import Path

import pytest
from flask import Flask
from werkzeug.serving import make_server

# Allow running the tests from a source checkout without installing
CLIENT_DIR = Path(__file__).resolve().parent.parent / "client"
if str(CLIENT_DIR) not in sys.path:
    sys.path.insert(0, str(CLIENT_DIR))


class MockServer:
    """Local HTTP server whose single catch-all route calls a swappable handler"""

    def __init__(self):
        self.app = Flask(__name__)
        self._handler = lambda: ("", 404)

        @self.app.route("/", defaults={"path": ""}, methods=["GET", "POST"])
        @self.app.route("/<path:path>", methods=["GET", "POST"])
        def dispatch(path):
            return self._handler()

        self._server = make_server("127.0.0.1", 0, self.app, threaded=True)
        self.url = f"http://127.0.0.1:{self._server.server_port}"
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    def handle(self, handler):
        """Install the view function used for every request"""
        self._handler = handler

    def start(self):
        self._thread.start()

    def shutdown(self):
        self._server.shutdown()
        self._thread.join(timeout=5)


@pytest.fixture
def mock_server():
    server = MockServer()
    server.start()
    yield server
    server.shutdown()


class ErrReader:
    """Stream whose reads always fail"""

    def __init__(self, stream=None):
        self.stream = stream

    def read(self, *args, **kwargs):
        raise OSError("test error")


LOOKUP_PAYLOAD = """{
    "url": "https://lookups.twilio.com/v1/PhoneNumbers/+15108675310?Type=carrier",
    "carrier": {
        "error_code": null,
        "type": "mobile",
        "name": "T-Mobile USA, Inc.",
        "mobile_network_code": "160",
        "mobile_country_code": "310"
    },
    "caller_name": {
      "caller_name": "John Smith",
      "caller_type": "consumer",
      "error_code": null
    },
    "national_format": "(510) 867-5310",
    "phone_number": "+15108675310",
    "country_code": "US"
}"""

SMS_PAYLOAD = """{
    "account_sid": "sid",
    "api_version": "2010-04-01",
    "body": "Hello!",
    "date_created": "Thu, 30 Jul 2015 20:12:31 +0000",
    "date_sent": "Thu, 30 Jul 2015 20:12:33 +0000",
    "date_updated": "Thu, 30 Jul 2015 20:12:33 +0000",
    "direction": "outbound-api",
    "error_code": null,
    "error_message": null,
    "from": "+14155552345",
    "messaging_service_sid": "MGXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX",
    "num_media": "0",
    "num_segments": "1",
    "price": -0.00750,
    "price_unit": "USD",
    "sid": "MMXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX",
    "status": "sent",
    "subresource_uris": {
        "media": "/2010-04-01/Accounts/sid/Messages/SMXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX/Media.json"
    },
    "to": "+15108675310",
    "uri": "/2010-04-01/Accounts/sid/Messages/SMXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX.json"
}"""

"""Shared fixtures: a local stub of the Google Translate v2 endpoint."""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

import pytest


class StubTranslateEndpoint:
    """
    Records every request and answers from a phrase -> (status, translation) table.

    Phrases missing from the table are echoed back as their own translation.
    """

    def __init__(self):
        self.requests = []
        self.responses = {}
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._handler_class())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}/language/translate/v2"

    def respond(self, phrase: str, translation: str = "", status: int = 200) -> None:
        self.responses[phrase] = (status, translation)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()

    def _handler_class(self):
        endpoint = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                query = {k: v[0] for k, v in parse_qs(urlparse(self.path).query).items()}
                endpoint.requests.append(query)

                phrase = query.get("q", "")
                status, translation = endpoint.responses.get(phrase, (200, phrase))
                if status == 200:
                    body = {"data": {"translations": [{"translatedText": translation}]}}
                else:
                    body = {"error": {"code": status, "message": "stub failure"}}

                payload = json.dumps(body).encode("utf-8")
                self.send_response(status)
                self.send_header("Content-Type", "application/json; charset=utf-8")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            def log_message(self, format, *args):
                pass

        return Handler


@pytest.fixture
def translate_endpoint():
    """Provide a running stub endpoint, shut down after the test."""
    endpoint = StubTranslateEndpoint()
    endpoint.start()
    yield endpoint
    endpoint.stop()

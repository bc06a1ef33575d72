from __future__ import absolute_import

import socket
import threading

from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest


class RecordingServer(HTTPServer):
    """
    HTTP server keeping every request it gets, answering with
    ``response_status``.
    """

    def __init__(self):
        HTTPServer.__init__(self, ('127.0.0.1', 0), RecordingHandler)
        self.requests = []
        self.response_status = 200
        self.received = threading.Event()

    @property
    def port(self):
        return self.server_address[1]


class RecordingHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        length = int(self.headers.get('Content-Length', 0))
        body = self.rfile.read(length)
        self.server.requests.append({
            'path': self.path,
            'headers': dict(self.headers),
            'body': body,
        })
        status = self.server.response_status
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', '2')
        self.end_headers()
        self.wfile.write(b'{}')
        self.server.received.set()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_server():
    server = RecordingServer()
    thread = threading.Thread(target=server.serve_forever)
    thread.daemon = True
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def udp_server():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(('127.0.0.1', 0))
    sock.settimeout(2)
    try:
        yield sock
    finally:
        sock.close()


@pytest.fixture
def closed_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port

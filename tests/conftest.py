"""Pytest fixtures for pysbss tests."""
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable, Dict, List, Optional
from urllib.parse import parse_qs

import pytest

from pysbss import AuthRequest


CHALLENGE_RESPONSE = (
    b'({"success":false,"authorized":false,"login":null,'
    b'"challenge":5698316,"cname":"3b47a663b0765fe1"})'
)
SUCCESS_RESPONSE = b'({"success":true})'


@dataclass
class RecordedRequest:
    """Request seen by the test server."""
    method: str
    path: str
    headers: Dict[str, str]
    body: bytes
    
    @property
    def form(self) -> Dict[str, str]:
        return {k: v[0] for k, v in parse_qs(self.body.decode('ascii')).items()}
    
    @property
    def cookies(self) -> Dict[str, str]:
        result = {}
        for part in self.headers.get('Cookie', '').split(';'):
            if '=' in part:
                name, value = part.strip().split('=', 1)
                result[name] = value
        return result


@dataclass
class CrmServer:
    """Handle returned by the crm_server fixture."""
    url: str
    requests: List[RecordedRequest] = field(default_factory=list)
    responder: Optional[Callable[[RecordedRequest], bytes]] = None
    set_cookie: Optional[str] = None


class _CrmHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"
    
    def log_message(self, fmt, *args):
        return
    
    def _handle(self):
        length = int(self.headers.get('Content-Length') or 0)
        body = self.rfile.read(length) if length > 0 else b''
        record = RecordedRequest(
            method=self.command,
            path=self.path,
            headers={k: v for k, v in self.headers.items()},
            body=body,
        )
        crm = self.server.crm
        crm.requests.append(record)
        
        payload = crm.responder(record) if crm.responder else b''
        self.send_response(200)
        self.send_header('Content-Type', 'text/html; charset=utf-8')
        self.send_header('Content-Length', str(len(payload)))
        self.send_header('Connection', 'close')
        if crm.set_cookie:
            self.send_header('Set-Cookie', crm.set_cookie)
        self.end_headers()
        self.wfile.write(payload)
    
    do_GET = _handle
    do_POST = _handle


@pytest.fixture
def crm_server():
    """Local HTTP server recording requests; set ``responder`` to answer."""
    httpd = ThreadingHTTPServer(('127.0.0.1', 0), _CrmHandler)
    host, port = httpd.server_address[:2]
    httpd.crm = CrmServer(url=f"http://{host}:{port}/index.php")
    
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield httpd.crm
    finally:
        httpd.shutdown()
        thread.join(timeout=5.0)
        httpd.server_close()


@pytest.fixture
def auth_request():
    """Returns credentials used by the fixed signature vectors."""
    return AuthRequest.create('user1', 'password1')


@pytest.fixture
def signing_server(crm_server):
    """Server that accepts only the correctly signed challenge 5698316."""
    def respond(request):
        form = request.form
        if form.get('login') == 'user1' and \
                form.get('authorize') == '85c0f07a48e711b8c91923f3b6779e737f7e39cc':
            return SUCCESS_RESPONSE
        return CHALLENGE_RESPONSE
    
    crm_server.responder = respond
    return crm_server

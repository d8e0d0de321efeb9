"""Общие фикстуры тестов клиента Youtu"""
import json
import socket
import threading
import time

import httpx
import pytest

from youtu import AppSign, YoutuClient

HOST = "http://youtu.test"


@pytest.fixture
def credential():
    return AppSign(app_id=1, secret_id="A", secret_key="B", user_id="")


class Recorder:
    """MockTransport, запоминающий запросы и отдающий заданный ответ"""

    def __init__(self, status_code=200, body=b"{}"):
        self.status_code = status_code
        self.body = body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.body
        if isinstance(body, dict):
            body = json.dumps(body).encode("utf-8")
        return httpx.Response(self.status_code, content=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client(credential):
    clients = []

    def factory(handler, **kwargs):
        client = YoutuClient(
            credential, host=HOST, transport=httpx.MockTransport(handler), **kwargs
        )
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def silent_server():
    """Адрес сервера, который принимает соединение, но никогда не отвечает"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    host, port = sock.getsockname()
    yield f"http://{host}:{port}"
    sock.close()


@pytest.fixture
def trickling_server():
    """Адрес сервера, который сразу отдаёт заголовки, а тело - по байту раз в 0.1с"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    sock.settimeout(5)
    stop = threading.Event()

    def serve():
        try:
            conn, _ = sock.accept()
        except OSError:
            return
        with conn:
            try:
                conn.recv(65536)
                conn.sendall(
                    b"HTTP/1.1 200 OK\r\nContent-Type: text/json\r\n"
                    b"Content-Length: 100\r\n\r\n"
                )
                for _ in range(100):
                    if stop.is_set():
                        break
                    conn.sendall(b" ")
                    time.sleep(0.1)
            except OSError:
                pass

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    host, port = sock.getsockname()
    yield f"http://{host}:{port}"
    stop.set()
    sock.close()
    thread.join(timeout=2)

import json
import urllib.error
import urllib.request

import pytest

from airspacegrid.server import SUCCESS_BODY, ActionServer


def _post(server, path, body):
    host, port = server.address
    request = urllib.request.Request(
        f"http://127.0.0.1:{port}{path}", data=body.encode("utf-8"), method="POST"
    )
    with urllib.request.urlopen(request, timeout=5) as response:
        return response.status, response.headers.get("Content-Type"), response.read()


def test_post_action_delivers_body_and_answers_success():
    received = []
    with ActionServer(received.append, host="127.0.0.1", port=0) as server:
        message = json.dumps({"action": "add", "weatherdata": {"weather": "晴"}}, ensure_ascii=False)
        status, content_type, body = _post(server, "/action", message)
    assert status == 200
    assert content_type == "application/json"
    assert body == SUCCESS_BODY
    assert json.loads(body) == {"status": "success"}
    assert received == [message]


def test_callback_failure_still_reports_success():
    def failing(body):
        raise RuntimeError("boom")

    with ActionServer(failing, host="127.0.0.1", port=0) as server:
        status, _, body = _post(server, "/action", "{}")
    assert status == 200
    assert body == SUCCESS_BODY


def test_unknown_path_is_not_found():
    received = []
    with ActionServer(received.append, host="127.0.0.1", port=0) as server:
        with pytest.raises(urllib.error.HTTPError) as info:
            _post(server, "/other", "{}")
    assert info.value.code == 404
    assert received == []


def test_running_state_and_address():
    server = ActionServer(lambda body: None, host="127.0.0.1", port=0)
    assert server.running is False
    with pytest.raises(RuntimeError):
        server.address
    server.start()
    try:
        assert server.running is True
        assert server.address[1] > 0
    finally:
        server.stop()
    assert server.running is False


def test_start_twice_keeps_same_address():
    server = ActionServer(lambda body: None, host="127.0.0.1", port=0)
    server.start()
    try:
        first = server.address
        server.start()
        assert server.address == first
    finally:
        server.stop()


def test_default_port_matches_source():
    server = ActionServer(lambda body: None)
    assert (server.host, server.port) == ("0.0.0.0", 174)
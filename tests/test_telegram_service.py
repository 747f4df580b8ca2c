import pytest
import requests

from services.telegram_service import (
    build_send_message_url,
    format_usage_message,
    send_telegram_message,
)
from utils.exceptions import NotifyError

from conftest import BOT_TOKEN, CHAT_ID, FakeResponse, FakeSession


def test_format_usage_message():
    assert format_usage_message(42) == "Current swimming pool usage is 42%"


def test_build_send_message_url_strips_trailing_slash():
    assert (
        build_send_message_url("abc:123", "https://api.telegram.org/")
        == "https://api.telegram.org/botabc:123/sendMessage"
    )


def test_send_posts_form_fields_once():
    session = FakeSession()

    send_telegram_message(BOT_TOKEN, CHAT_ID, "hello pool", timeout=4.0, session=session)

    assert len(session.post_calls) == 1
    url, kwargs = session.post_calls[0]
    assert url == f"https://api.telegram.org/bot{BOT_TOKEN}/sendMessage"
    assert kwargs["data"] == {"chat_id": CHAT_ID, "text": "hello pool"}
    assert kwargs["timeout"] == 4.0
    assert session.get_calls == []


def test_send_uses_configured_api_base():
    session = FakeSession()

    send_telegram_message(BOT_TOKEN, CHAT_ID, "hi", api_base="http://localhost:8081", session=session)

    assert session.post_calls[0][0] == f"http://localhost:8081/bot{BOT_TOKEN}/sendMessage"


@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 201])
def test_non_200_response_raises_with_body(status_code):
    body = '{"ok":false,"error_code":400,"description":"Bad Request: chat not found"}'
    session = FakeSession(post_response=FakeResponse(body, status_code=status_code))

    with pytest.raises(NotifyError) as excinfo:
        send_telegram_message(BOT_TOKEN, CHAT_ID, "hi", session=session)

    assert "chat not found" in str(excinfo.value)
    assert str(status_code) in str(excinfo.value)
    assert excinfo.value.status_code == status_code
    assert excinfo.value.response_body == body
    assert len(session.post_calls) == 1


def test_transport_failure_raises_without_leaking_token():
    error = requests.ConnectionError(f"Max retries exceeded with url: /bot{BOT_TOKEN}/sendMessage")
    session = FakeSession(post_error=error)

    with pytest.raises(NotifyError) as excinfo:
        send_telegram_message(BOT_TOKEN, CHAT_ID, "hi", session=session)

    assert "failed to send message" in str(excinfo.value)
    assert BOT_TOKEN not in str(excinfo.value)

import pytest
import requests

from config.database import create_db_engine, get_session_factory, init_database
from config.settings import Settings

ENV_VARS = (
    "DATABASE_URL",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "TELEGRAM_API_BASE",
    "POOL_USAGE_URL",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
)

POOL_URL = "https://pool.example.com/"
BOT_TOKEN = "123456:secret-token"
CHAT_ID = "-100200300"


def usage_page(percentage, font_size="1.5"):
    return (
        "<html><body><div class=\"usage\">"
        "Šiuo metu esantis Lazdynų baseino ir sporto klubo užimtumas: "
        f"<span style=\"font-size:{font_size}rem;\">{percentage}%</span>"
        "</div></body></html>"
    )


class FakeResponse:
    def __init__(self, text="", status_code=200, headers=None, read_error=None):
        self._text = text
        self.status_code = status_code
        self.headers = headers if headers is not None else {"Content-Type": "text/html; charset=utf-8"}
        self.encoding = None
        self.read_error = read_error
        self.closed = False

    @property
    def text(self):
        if self.read_error is not None:
            raise self.read_error
        return self._text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True
        return False


class FakeSession:
    def __init__(self, get_response=None, post_response=None, get_error=None, post_error=None):
        self.get_response = get_response
        self.post_response = post_response if post_response is not None else FakeResponse('{"ok":true}')
        self.get_error = get_error
        self.post_error = post_error
        self.get_calls = []
        self.post_calls = []

    def get(self, url, **kwargs):
        self.get_calls.append((url, kwargs))
        if self.get_error is not None:
            raise self.get_error
        return self.get_response

    def post(self, url, **kwargs):
        self.post_calls.append((url, kwargs))
        if self.post_error is not None:
            raise self.post_error
        return self.post_response


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'pool_usage.db'}"


@pytest.fixture
def engine(database_url):
    engine = create_db_engine(database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    init_database(engine)
    return get_session_factory(engine)


@pytest.fixture
def settings(database_url):
    return Settings(
        database_url=database_url,
        pool_usage_url=POOL_URL,
        telegram_bot_token=BOT_TOKEN,
        telegram_chat_id=CHAT_ID,
        telegram_api_base="https://telegram.example.com",
        request_timeout=5.0,
    )

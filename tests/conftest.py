import pytest
import pytest_asyncio
from bolibro.client import BolibroClient
from bolibro.config import Settings
from bolibro.session import SessionContext, TokenStore

from tests.payloads import API


@pytest.fixture
def settings(tmp_path):
    return Settings(
        api_url=API,
        nominatim_url="https://nominatim.test",
        session_file=tmp_path / "session.json",
    )


@pytest.fixture
def session(settings):
    return SessionContext(TokenStore(settings.session_file))


@pytest_asyncio.fixture
async def client(settings, session):
    api = BolibroClient(settings, session)
    yield api
    await api.aclose()

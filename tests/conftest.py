import os
import tempfile
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Configure the environment before any codevoyage module reads it
_TEST_DIR = tempfile.mkdtemp(prefix="codevoyage-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["GENERATION_DELAY_SECONDS"] = "0"
os.environ["LOG_FILE"] = os.path.join(_TEST_DIR, "test.log")

from codevoyage.database import Base, SessionLocal, engine  # noqa: E402
import codevoyage.models  # noqa: E402,F401

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def profile() -> dict:
    return {
        "name": "Ada",
        "goal": "build a web application",
        "language": "JavaScript",
        "current_skill": 1,
        "learning_style": "Hands-on",
        "time_commitment": "moderate",
        "additional_info": "",
    }


@pytest.fixture()
def auth_headers() -> dict:
    return {"X-User-Id": USER_ID}


@pytest_asyncio.fixture()
async def client() -> AsyncGenerator[AsyncClient, None]:
    from codevoyage.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

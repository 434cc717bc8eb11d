"""Shared fixtures: in-memory database, temporary upload dirs, a fake clock."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

# Point module-level configuration at throwaway locations before the app is imported.
_TMP = tempfile.mkdtemp(prefix="flappy-face-tests-")
os.environ["DATA_DIR"] = os.path.join(_TMP, "data")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'data', 'app.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["PUBLIC_DIR"] = os.path.join(_TMP, "public")
os.environ["CHARACTERS"] = "bird,pipe,cloud"
os.environ["SERVICE_NAME"] = "flappy-face"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, create_engine  # noqa: E402

from flappy_face.api.dependencies import (  # noqa: E402
    AVATARS_URL_PREFIX,
    FACES_URL_PREFIX,
    get_avatar_store,
    get_face_store,
)
from flappy_face.app import app  # noqa: E402
from flappy_face.core import get_session, init_db  # noqa: E402
from flappy_face.services import AssetStore, LeaderboardStore  # noqa: E402


class FakeClock:
    """Stand-in for ``utcnow`` that advances one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session):
    return LeaderboardStore(session)


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr("flappy_face.services.leaderboard.utcnow", fake)
    return fake


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(engine, upload_dir):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_face_store] = lambda: AssetStore(
        upload_dir / "faces", FACES_URL_PREFIX
    )
    app.dependency_overrides[get_avatar_store] = lambda: AssetStore(
        upload_dir / "avatars", AVATARS_URL_PREFIX, fixed_suffix=".png"
    )
    yield TestClient(app)
    app.dependency_overrides.clear()

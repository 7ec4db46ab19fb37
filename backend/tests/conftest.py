from __future__ import annotations

import uuid

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.app.config import settings
from backend.app.db import get_db
from backend.app.integrations.supabase_storage import StoredObject
from backend.app.main import create_app
from backend.app.models import Base, Profile
from backend.app.services.storage_service import StorageService, get_storage_service


class FakeStorageClient:
    """In-memory stand-in for the storage REST client."""

    def __init__(self, objects=None):
        self.objects = list(objects or [])
        self.uploaded = []
        self.removed = []

    def list_objects(self, bucket, prefix="", *, limit=1000):
        return list(self.objects)

    def upload(self, bucket, path, data, content_type):
        self.uploaded.append((bucket, path, data, content_type))
        return path

    def remove(self, bucket, paths):
        self.removed.extend((bucket, p) for p in paths)

    def public_url(self, bucket, path):
        return f"http://storage.test/storage/v1/object/public/{bucket}/{path}"


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    monkeypatch.setattr(settings, "REDIS_URL", None)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, expire_on_commit=False, future=True)
    session = Session()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def storage_client():
    return FakeStorageClient(
        [
            StoredObject(name="uploads/a.jpg", size=1024 * 1024, mimetype="image/jpeg"),
            StoredObject(name="uploads/docs/b.PDF", size=2 * 1024 * 1024, mimetype="application/pdf"),
        ]
    )


@pytest.fixture
def client(db_session, storage_client):
    app = create_app()

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage_service] = lambda: StorageService(storage_client, bucket="images", quota_mb=1024)
    with TestClient(app) as c:
        yield c


def make_token(user_id) -> str:
    return jwt.encode(
        {"sub": str(user_id), "aud": settings.SUPABASE_JWT_AUDIENCE},
        settings.SUPABASE_JWT_SECRET,
        algorithm="HS256",
    )


def auth_headers(user_id) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


def _profile(db_session, role):
    profile = Profile(user_id=uuid.uuid4(), email=f"{role}@ejdev.test", role=role)
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def admin(db_session):
    return _profile(db_session, "admin")


@pytest.fixture
def editor(db_session):
    return _profile(db_session, "editor")


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin.user_id)


@pytest.fixture
def editor_headers(editor):
    return auth_headers(editor.user_id)


@pytest.fixture
def headers_for():
    return auth_headers

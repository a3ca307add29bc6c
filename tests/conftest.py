import mongomock
import pytest
from fastapi.testclient import TestClient

from database import ensure_indexes
from mailer import Mailer
from main import app, get_db, get_mailer, get_media
from media import MediaStore


class RecordingMailer(Mailer):
    def __init__(self, fail=False):
        super().__init__(api_key="test-key", sender="shop@example.com")
        self.fail = fail
        self.sent = []

    def send(self, to, subject, html_body):
        if self.fail:
            raise ConnectionError("mail relay unreachable")
        self.sent.append({"to": to, "subject": subject, "html": html_body})
        return {"id": "test"}


class CountingMediaStore(MediaStore):
    def __init__(self, root):
        super().__init__(root)
        self.deleted = []

    def delete(self, filename):
        if filename:
            self.deleted.append(filename)
        return super().delete(filename)


@pytest.fixture
def db():
    database = mongomock.MongoClient()["shop_test"]
    ensure_indexes(database)
    return database


@pytest.fixture
def media(tmp_path):
    return CountingMediaStore(str(tmp_path / "uploads"))


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(db, media, mailer):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_media] = lambda: media
    app.dependency_overrides[get_mailer] = lambda: mailer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def png():
    def make(name="photo.png", data=b"\x89PNG\r\n\x1a\nfake"):
        return (name, data, "image/png")
    return make

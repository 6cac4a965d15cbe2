from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nbd_api.config import settings
from nbd_api.core.email_client import email_client
from nbd_api.core.security import create_access_token, get_password_hash
from nbd_api.db.base import Base
from nbd_api.db.models import Follow, Release, Song, Tag, Track, User
from nbd_api.db.session import get_db
from nbd_api.main import app

DEFAULT_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    # Cost 12 is the production default; tests only need a valid hash
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sent_emails(monkeypatch):
    """Capture outgoing email instead of calling the provider"""
    sent = []

    def fake_send_email(to, subject, html_body):
        sent.append({"to": to, "subject": subject, "html": html_body})
        return True

    monkeypatch.setattr(email_client, "send_email", fake_send_email)
    return sent


def make_user(db, username, email=None, password=DEFAULT_PASSWORD, name=None):
    user = User(
        username=username,
        email=(email or f"{username}@example.com").lower(),
        name=name,
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_follow(db, follower, following, created_at=None):
    edge = Follow(
        follower_id=follower.id,
        following_id=following.id,
        created_at=created_at or datetime.utcnow(),
    )
    db.add(edge)
    db.commit()
    return edge


def get_or_create_tag(db, name):
    tag = db.query(Tag).filter(Tag.name == name).first()
    if not tag:
        tag = Tag(name=name)
        db.add(tag)
        db.flush()
    return tag


def make_release(db, owner, title, uploaded_at=None, release_date=None, tags=(), tracks=()):
    """`tracks` is a sequence of (track_number, title) pairs"""
    release = Release(
        user_id=owner.id,
        title=title,
        uploaded_at=uploaded_at or datetime.utcnow(),
        release_date=release_date,
    )
    release.tags = [get_or_create_tag(db, name) for name in tags]
    release.tracks = [
        Track(
            title=track_title,
            track_number=number,
            file_name=f"{track_title}.mp3",
            file_url=f"https://blob.example.com/tracks/{track_title}.mp3",
            file_size=1024,
            mime_type="audio/mpeg",
        )
        for number, track_title in tracks
    ]
    db.add(release)
    db.commit()
    db.refresh(release)
    return release


def make_song(db, owner, title, uploaded_at=None, tags=()):
    song = Song(
        user_id=owner.id,
        title=title,
        file_url=f"https://blob.example.com/tracks/{title}.mp3",
        mime_type="audio/mpeg",
        uploaded_at=uploaded_at or datetime.utcnow(),
    )
    song.tags = [get_or_create_tag(db, name) for name in tags]
    db.add(song)
    db.commit()
    db.refresh(song)
    return song


def auth_headers(user):
    token = create_access_token({"sub": user.username}, expires_delta=timedelta(minutes=5))
    return {"Authorization": f"Bearer {token}"}

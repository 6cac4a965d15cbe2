import re

import pytest

from nbd_api.core.exceptions import InvalidInput
from nbd_api.schemas.upload import UploadUrlRequest
from nbd_api.services.upload_service import upload_service
from tests.conftest import auth_headers, make_user


@pytest.fixture
def headers(db):
    return auth_headers(make_user(db, "alice"))


def test_requires_session(client):
    response = client.post("/api/upload-url", json={
        "filename": "song.mp3", "contentType": "audio/mpeg", "fileType": "track",
    })
    assert response.status_code == 401
    assert response.json() == {"error": "You must be logged in to upload files"}


def test_invalid_bearer_token_is_401(client):
    response = client.post(
        "/api/upload-url",
        json={"filename": "song.mp3", "contentType": "audio/mpeg"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


@pytest.mark.parametrize("kwargs", [
    {"json": {"fileSize": "big"}},
    {"json": {"filename": 5}},
    {"content": "not json", "headers": {"Content-Type": "application/json"}},
])
def test_session_checked_before_body(client, kwargs):
    response = client.post("/api/upload-url", **kwargs)
    assert response.status_code == 401
    assert response.json() == {"error": "You must be logged in to upload files"}


def test_non_json_body_is_400(client, headers):
    response = client.post(
        "/api/upload-url",
        content="not json",
        headers={**headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_wrongly_typed_field_is_400(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "song.mp3", "contentType": "audio/mpeg", "fileSize": "big",
    }, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid value for fileSize:")


@pytest.mark.parametrize("body", [
    {"contentType": "audio/mpeg", "fileType": "track"},
    {"filename": "song.mp3", "fileType": "track"},
    {"filename": "", "contentType": "audio/mpeg"},
])
def test_requires_filename_and_content_type(client, headers, body):
    response = client.post("/api/upload-url", json=body, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Filename and content type are required"}


def test_track_upload_path(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "song.mp3",
        "contentType": "audio/mpeg",
        "fileType": "track",
        "fileSize": 123456,
    }, headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert re.fullmatch(r"tracks/\d{13}-song\.mp3", body["pathname"])
    assert body["contentType"] == "audio/mpeg"
    assert body["fileSize"] == 123456


def test_track_accepts_any_audio_subtype(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "song.opus", "contentType": "audio/opus", "fileType": "track",
    }, headers=headers)
    assert response.status_code == 200


def test_track_rejects_non_audio(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "cover.png", "contentType": "image/png", "fileType": "track",
    }, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid audio file type"}


def test_artwork_upload_path(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "cover.png", "contentType": "image/png", "fileType": "artwork",
    }, headers=headers)
    assert response.status_code == 200
    assert response.json()["pathname"].startswith("artwork/")


def test_artwork_rejects_audio(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "song.mp3", "contentType": "audio/mpeg", "fileType": "artwork",
    }, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid image file type"}


def test_artwork_rejects_unlisted_image_type(client, headers):
    response = client.post("/api/upload-url", json={
        "filename": "cover.svg", "contentType": "image/svg+xml", "fileType": "artwork",
    }, headers=headers)
    assert response.status_code == 400


def test_other_file_types_are_not_checked():
    request = UploadUrlRequest(filename="notes.txt", content_type="text/plain", file_type="document")
    response = upload_service.issue_upload_path(request, now_ms=1700000000000)
    assert response.pathname == "tracks/1700000000000-notes.txt"


def test_missing_file_type_goes_to_tracks_folder():
    request = UploadUrlRequest(filename="a.bin", content_type="application/octet-stream")
    assert upload_service.issue_upload_path(request, now_ms=1).pathname == "tracks/1-a.bin"


def test_service_raises_invalid_input():
    with pytest.raises(InvalidInput):
        upload_service.issue_upload_path(UploadUrlRequest(filename="x.mp3"))

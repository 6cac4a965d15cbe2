from nbd_api.db.models.user import User
from nbd_api.db.models.password_reset import PasswordResetToken
from nbd_api.db.models.follow import Follow
from nbd_api.db.models.tag import Tag, release_tags, song_tags
from nbd_api.db.models.release import Release, Track
from nbd_api.db.models.song import Song

__all__ = [
    "User",
    "PasswordResetToken",
    "Follow",
    "Tag",
    "release_tags",
    "song_tags",
    "Release",
    "Track",
    "Song",
]

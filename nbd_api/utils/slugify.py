# ============================================================================
# FILE: nbd_api/utils/slugify.py
# ============================================================================
import re

MAX_SLUG_LENGTH = 100

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

def create_release_slug(release_title: str, artist_name: str) -> str:
    """
    Build a URL-safe slug from artist and title, e.g.
    ("My Song!", "DJ X") -> "dj-x-my-song"
    """
    slug = f"{artist_name}-{release_title}".lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    slug = slug.strip("-")
    return slug[:MAX_SLUG_LENGTH]

def create_release_url(release_id, release_title: str, artist_name: str) -> str:
    """Canonical release path; the id disambiguates, the slug is cosmetic"""
    return f"/release/{release_id}/{create_release_slug(release_title, artist_name)}"

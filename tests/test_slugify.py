from nbd_api.utils.slugify import create_release_slug, create_release_url


def test_slug_joins_artist_and_title():
    assert create_release_slug("My Song!", "DJ X") == "dj-x-my-song"


def test_slug_collapses_whitespace_and_hyphens():
    assert create_release_slug("  a--b  ", "c") == "c-a-b"


def test_slug_empty_after_strip():
    assert create_release_slug("!!!", "???") == ""
    assert create_release_slug("", "") == ""


def test_slug_drops_non_ascii_letters():
    assert create_release_slug("Café Nöir", "Ünit") == "nit-caf-nir"


def test_slug_is_truncated_to_100_characters():
    slug = create_release_slug("x" * 200, "artist")
    assert len(slug) == 100
    assert slug.startswith("artist-xxx")


def test_slug_is_deterministic():
    assert create_release_slug("Night Drive", "Lo Fi") == create_release_slug("Night Drive", "Lo Fi")


def test_release_url():
    assert create_release_url(42, "My Song!", "DJ X") == "/release/42/dj-x-my-song"


def test_release_url_keeps_id_as_disambiguator():
    assert create_release_url(1, "Same", "Artist") != create_release_url(2, "Same", "Artist")

from ogembed.models import EmbedParams
from ogembed.sanitize import Limits
from ogembed.validators import (
    EMPTY_FIELD,
    INVALID_FORMAT,
    SCHEME_NOT_ALLOWED,
    TOO_LONG,
    validate_description,
    validate_footer,
    validate_image_url,
    validate_params,
    validate_title,
)


def test_validate_title_bounds():
    empty = validate_title("")
    assert empty.valid is False
    assert empty.code == EMPTY_FIELD
    assert empty.error == "Title is required"
    assert validate_title("   ").valid is False
    assert validate_title(None).valid is False

    too_long = validate_title("a" * 201)
    assert too_long.valid is False
    assert too_long.code == TOO_LONG
    assert too_long.error == "Title must be 200 characters or less"

    ok = validate_title("a" * 200)
    assert ok.valid is True
    assert ok.error is None


def test_validate_title_uses_custom_limits():
    limits = Limits(title=3, description=10, footer=10)
    assert validate_title("abc", limits).valid is True
    assert validate_title("abcd", limits).error == "Title must be 3 characters or less"


def test_validate_description_bounds():
    assert validate_description("").error == "Description is required"
    assert validate_description("a" * 1000).valid is True
    too_long = validate_description("a" * 1001)
    assert too_long.valid is False
    assert too_long.error == "Description must be 1000 characters or less"


def test_validate_footer_is_optional():
    assert validate_footer("").valid is True
    assert validate_footer(None).valid is True
    assert validate_footer("a" * 200).valid is True
    too_long = validate_footer("a" * 201)
    assert too_long.valid is False
    assert too_long.code == TOO_LONG
    assert too_long.error == "Footer must be 200 characters or less"


def test_validate_image_url_accepts_empty_and_https():
    assert validate_image_url("").valid is True
    assert validate_image_url(None).valid is True
    assert validate_image_url("   ").valid is True
    assert validate_image_url("https://example.com/x.png").valid is True
    assert validate_image_url("HTTPS://EXAMPLE.COM/X.PNG").valid is True


def test_validate_image_url_accepts_any_host():
    assert validate_image_url("https://localhost/x.png").valid is True
    assert validate_image_url("https://127.0.0.1:8443/x.png").valid is True


def test_validate_image_url_rejects_other_schemes():
    for url in ("http://example.com/x.png", "ftp://example.com/x.png", "javascript:alert(1)"):
        result = validate_image_url(url)
        assert result.valid is False
        assert result.code == SCHEME_NOT_ALLOWED
        assert result.error == "Image URL must be HTTPS only"


def test_validate_image_url_rejects_malformed_values():
    for url in (
        "not a url",
        "https://",
        "https://[::1",
        "https://example.com:99999/x.png",
        "/relative/x.png",
    ):
        result = validate_image_url(url)
        assert result.valid is False, url
        assert result.code == INVALID_FORMAT
        assert result.error == "Invalid URL format"


def test_validate_params_trims_and_keys_results():
    results = validate_params(
        EmbedParams(title="  ", desc=" ok ", footer="", image="http://example.com/a.png")
    )
    assert list(results) == ["title", "description", "footer", "image"]
    assert results["title"].code == EMPTY_FIELD
    assert results["description"].valid is True
    assert results["footer"].valid is True
    assert results["image"].code == SCHEME_NOT_ALLOWED

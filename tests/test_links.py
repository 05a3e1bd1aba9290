from ogembed.links import build_discord_message, build_shareable_url, get_embed_params
from ogembed.models import EmbedParams


def test_build_shareable_url_single_key():
    assert build_shareable_url({"title": "X"}) == "/embed?title=X"


def test_build_shareable_url_omits_empty_values_and_encodes():
    url = build_shareable_url(
        EmbedParams(
            title="Hello World",
            desc="a&b",
            footer="",
            image="https://example.com/a.png",
        )
    )
    assert url == "/embed?title=Hello+World&desc=a%26b&image=https%3A%2F%2Fexample.com%2Fa.png"


def test_build_shareable_url_without_values():
    assert build_shareable_url({}) == "/embed?"
    assert build_shareable_url(EmbedParams()) == "/embed?"


def test_build_shareable_url_keeps_key_order():
    url = build_shareable_url({"image": "https://e.com/i.gif", "footer": "f", "title": "t"})
    assert url == "/embed?title=t&footer=f&image=https%3A%2F%2Fe.com%2Fi.gif"


def test_get_embed_params_from_query_string():
    params = get_embed_params("?title=Hi+there&desc=Body%20text&footer=&image=")
    assert params == EmbedParams(title="Hi there", desc="Body text", footer="", image=None)


def test_get_embed_params_defaults():
    assert get_embed_params("") == EmbedParams(title="", desc="", footer="", image=None)
    assert get_embed_params(None) == EmbedParams()


def test_get_embed_params_from_mapping_uses_first_value():
    params = get_embed_params({"title": ["A", "B"], "image": ["https://e.com/a.png"]})
    assert params.title == "A"
    assert params.desc == ""
    assert params.image == "https://e.com/a.png"


def test_build_discord_message():
    assert build_discord_message("Hi", "https://x.test/embed?title=Hi") == (
        "[Hi](https://x.test/embed?title=Hi)"
    )
    assert build_discord_message("  ", "https://x.test/embed") == (
        "[Untitled Card](https://x.test/embed)"
    )

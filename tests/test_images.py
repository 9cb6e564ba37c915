import pytest

from engine.art_managers.images import (
    PLACEHOLDER_URL,
    classify_image,
    describe_image,
    optimize_artwork,
    optimize_image,
)
from engine.models.image_model import ArtworkImage, ImageSource


@pytest.mark.parametrize("value", [None, "", 42, 3.5, b"https://example.com/a.jpg", ["x"], {}])
def test_missing_or_non_string_is_placeholder(value):
    assert optimize_image(value) == PLACEHOLDER_URL


def test_remote_url_is_proxied():
    assert (
        optimize_image("https://example.com/a.jpg")
        == "https://images.weserv.nl/?url=https%3A%2F%2Fexample.com%2Fa.jpg&w=480&q=80"
    )


@pytest.mark.parametrize(
    "url",
    [
        "/lesson-images/foo.png",
        "https://images.weserv.nl/?url=x",
        "https://cdn.example.com/a.jpg?from=/lesson-images",
    ],
)
def test_local_and_proxied_pass_through(url):
    assert optimize_image(url) == url


def test_component_encoding_rules():
    result = optimize_image("http://x.org/a b/(c)!*~'é?q=1&r=2#f")
    assert result == (
        "https://images.weserv.nl/?url="
        "http%3A%2F%2Fx.org%2Fa%20b%2F(c)!*~'%C3%A9%3Fq%3D1%26r%3D2%23f"
        "&w=480&q=80"
    )


def test_unencodable_string_falls_back_to_placeholder(caplog):
    assert optimize_image("https://example.com/\ud800.jpg") == PLACEHOLDER_URL
    assert "using placeholder" in caplog.text


@pytest.mark.parametrize(
    "url", ["https://example.com/a.jpg", "/lesson-images/foo.png", "relative/path.png"]
)
def test_idempotent(url):
    once = optimize_image(url)
    assert optimize_image(once) == once


def test_classify_image():
    assert classify_image(None) is ImageSource.PLACEHOLDER
    assert classify_image("/lesson-images/a.png") is ImageSource.PASSTHROUGH
    assert classify_image("https://example.com/a.jpg") is ImageSource.PROXIED


def test_describe_image_reports_kind():
    proxied = describe_image("https://example.com/a.jpg")
    assert proxied.kind is ImageSource.PROXIED
    assert proxied.source == "https://example.com/a.jpg"

    missing = describe_image(42)
    assert missing.source is None
    assert missing.url == PLACEHOLDER_URL

    broken = describe_image("\udfff")
    assert broken.kind is ImageSource.PLACEHOLDER
    assert broken.url == PLACEHOLDER_URL
    assert broken.source is None


def test_describe_image_unencodable_passthrough():
    url = "/lesson-images/\ud800.png"
    assert optimize_image(url) == url

    described = describe_image(url)
    assert described.kind is ImageSource.PLACEHOLDER
    assert described.source is None
    assert described.url == PLACEHOLDER_URL


def test_optimize_artwork_returns_copy():
    artwork = ArtworkImage(_id="abc", artwork_title="Starry Night", image_url="https://example.com/a.jpg")
    optimized = optimize_artwork(artwork)

    assert optimized.image_url.startswith("https://images.weserv.nl/?url=")
    assert optimized.id == "abc"
    assert artwork.image_url == "https://example.com/a.jpg"

    assert optimize_artwork(ArtworkImage()).image_url == PLACEHOLDER_URL

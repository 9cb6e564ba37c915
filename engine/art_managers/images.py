import logging
from typing import Any, List
from urllib.parse import quote

from engine.models.image_model import ArtworkImage, ImageSource, OptimizedImage

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "https://www.redbubble.com/frontend-static/error/artwork.jpg"
PROXY_HOST_MARKER = "images.weserv.nl"
LOCAL_IMAGE_MARKER = "/lesson-images"
PROXY_TEMPLATE = "https://images.weserv.nl/?url={encoded}&w=480&q=80"

# Characters a URI component keeps as-is besides letters, digits and "-_."
_COMPONENT_SAFE = "!~*'()"


def classify_image(url: Any) -> ImageSource:
    """Decides how an image reference will be resolved, without building the URL."""
    if not isinstance(url, str) or not url:
        return ImageSource.PLACEHOLDER
    # Plain substring tests, a query value mentioning the marker also matches
    if PROXY_HOST_MARKER in url or LOCAL_IMAGE_MARKER in url:
        return ImageSource.PASSTHROUGH
    return ImageSource.PROXIED


def optimize_image(url: Any) -> str:
    """
    Rewrites a remote image URL so it is served resized through images.weserv.nl.
    Already proxied URLs and local lesson images are returned untouched, anything
    that is not a non-empty string resolves to the placeholder artwork.
    """
    kind = classify_image(url)
    if kind is ImageSource.PLACEHOLDER:
        return PLACEHOLDER_URL
    if kind is ImageSource.PASSTHROUGH:
        return url

    try:
        encoded = quote(url, safe=_COMPONENT_SAFE)
    except UnicodeEncodeError as e:
        logger.warning(f"Could not encode image URL {url!r}, using placeholder. Error: {e}")
        return PLACEHOLDER_URL
    return PROXY_TEMPLATE.format(encoded=encoded)


def _is_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def describe_image(url: Any) -> OptimizedImage:
    """
    Resolves an image reference for an API response. Text that is not valid
    UTF-8 resolves to the placeholder whatever its kind, since it cannot be
    serialized back to the client.
    """
    if isinstance(url, str) and not _is_encodable(url):
        logger.warning(f"Image reference {url!r} is not valid UTF-8, using placeholder.")
        return OptimizedImage(source=None, url=PLACEHOLDER_URL, kind=ImageSource.PLACEHOLDER)
    return OptimizedImage(
        source=url if isinstance(url, str) else None,
        url=optimize_image(url),
        kind=classify_image(url),
    )


def optimize_artwork(artwork: ArtworkImage) -> ArtworkImage:
    """Returns a copy of the artwork with its image_url routed through the resizer."""
    return artwork.model_copy(update={"image_url": describe_image(artwork.image_url).url})


class ProcessImages:

    async def optimize(url: Any) -> OptimizedImage:
        return describe_image(url)

    async def optimize_many(urls: List[Any]) -> List[OptimizedImage]:
        """
        Resolves a batch of image references, keeping the order they were sent in.
        """
        results = [describe_image(url) for url in urls]
        logger.debug(
            f"Optimized {len(results)} image references, "
            f"{sum(r.kind is ImageSource.PROXIED for r in results)} proxied."
        )
        return results

    async def optimize_artworks(artworks: List[ArtworkImage]) -> List[ArtworkImage]:
        return [optimize_artwork(artwork) for artwork in artworks]

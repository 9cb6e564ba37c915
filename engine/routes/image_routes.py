from typing import List, Optional

from fastapi import APIRouter, Query

from engine.art_managers.images import ProcessImages
from engine.models.image_model import ArtworkImage, OptimizedImage, OptimizeRequest


image_router = APIRouter(tags=["image"])


@image_router.get("/optimize", response_model=OptimizedImage, summary="Optimize Image URL")
async def optimize_image_url(
    url: Optional[str] = Query(None, description="URL of the image to serve resized")
):
    """
    Returns the URL a client should render for the given image reference.
    """
    return await ProcessImages.optimize(url)


@image_router.post(
    "/optimize", response_model=List[OptimizedImage], summary="Optimize Image URLs"
)
async def optimize_image_urls(body: OptimizeRequest):
    return await ProcessImages.optimize_many(body.urls)


@image_router.post(
    "/artworks",
    response_model=List[ArtworkImage],
    summary="Optimize Artwork Images",
)
async def optimize_artwork_images(artworks: List[ArtworkImage]):
    """
    Rewrites the image_url of every artwork so it is served through the resizer.
    """
    return await ProcessImages.optimize_artworks(artworks)

# engine/models/image_model.py
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ImageSource(str, Enum):
    PLACEHOLDER = "placeholder"
    PASSTHROUGH = "passthrough"
    PROXIED = "proxied"


class OptimizedImage(BaseModel):
    source: Optional[str] = Field(
        None, description="The image reference as it was received, when it was text."
    )
    url: str = Field(..., description="URL the client should render.")
    kind: ImageSource = Field(..., description="How the reference was resolved.")


class OptimizeRequest(BaseModel):
    # Items are left untyped: non-text values resolve to the placeholder
    urls: List[Any] = Field(default_factory=list)


class ArtworkImage(BaseModel):
    id: Optional[str] = Field(None, alias="_id")
    artwork_title: Optional[str] = None
    artist_name: Optional[str] = None
    image_url: Optional[str] = None

    model_config = {"populate_by_name": True}

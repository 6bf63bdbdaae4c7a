"""Pydantic schemas for creative studio assets."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AssetType(str, Enum):
    """Kind of generated asset."""
    IMAGE = "image"
    VIDEO = "video"
    COPY = "copy"
    SOCIAL = "social"


# Types whose ``content`` is generated text; images and videos store a URL
TEXT_ASSET_TYPES = {AssetType.COPY, AssetType.SOCIAL}


class AssetCreate(BaseModel):
    """Request body for saving an asset."""
    id: str = Field(..., min_length=1, description="Client-generated asset ID")
    type: AssetType
    title: str = Field(..., min_length=1)
    content: str = Field(..., description="Generated text, or the media URL")
    prompt: str = ""
    style: Optional[str] = None
    platform: Optional[str] = None
    generated_at: Optional[datetime] = None


class Asset(BaseModel):
    """A stored creative asset."""
    id: str
    user_id: str
    type: AssetType
    title: str
    content: str
    prompt: str = ""
    style: Optional[str] = None
    platform: Optional[str] = None
    generated_at: datetime


class AssetDeleteResponse(BaseModel):
    success: bool = True
    indexed: bool = Field(True, description="False if the index entry could not be removed")


class AssetSaveResponse(BaseModel):
    asset: Asset
    indexed: bool = Field(True, description="False if the index entry could not be written")

"""Database operations for creative studio assets."""

from datetime import UTC, datetime
from typing import Optional

from app.core.logging import get_logger
from app.core.schemas_assets import Asset, AssetCreate
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)


def list_assets(user_id: str) -> list[Asset]:
    """List a user's assets, newest first."""
    supabase = get_supabase()

    response = (
        supabase.table("creative_assets")
        .select("*")
        .eq("user_id", user_id)
        .order("generated_at", desc=True)
        .execute()
    )

    return [Asset(**row) for row in response.data or []]


def create_asset(user_id: str, data: AssetCreate) -> Asset:
    """
    Save a new asset.

    Raises:
        ValueError: If no row is returned
        Exception: If database operation fails
    """
    supabase = get_supabase()

    generated_at = data.generated_at or datetime.now(UTC)
    row = {
        "id": data.id,
        "user_id": user_id,
        "type": data.type.value,
        "title": data.title,
        "content": data.content,
        "prompt": data.prompt,
        "style": data.style,
        "platform": data.platform,
        "generated_at": generated_at.isoformat(),
    }

    response = supabase.table("creative_assets").insert(row).execute()

    if not response.data:
        raise ValueError("No data returned from create_asset")

    logger.info(f"Created asset {data.id}", extra={"user_id": user_id})
    return Asset(**response.data[0])


def delete_asset(user_id: str, asset_id: str) -> Optional[Asset]:
    """
    Delete one of a user's assets.

    Returns:
        The deleted asset, or None if the user has no asset with that ID
    """
    supabase = get_supabase()

    response = (
        supabase.table("creative_assets")
        .delete()
        .eq("id", asset_id)
        .eq("user_id", user_id)
        .execute()
    )

    if not response.data:
        return None

    logger.info(f"Deleted asset {asset_id}", extra={"user_id": user_id})
    return Asset(**response.data[0])

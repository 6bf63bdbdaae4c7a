"""Creative assets API - studio output, kept searchable through the index."""

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth_middleware import AuthContext, require_auth
from app.core.logging import get_logger
from app.core.schemas_assets import (
    TEXT_ASSET_TYPES,
    Asset,
    AssetCreate,
    AssetDeleteResponse,
    AssetSaveResponse,
)
from app.core.schemas_search import EntityType
from app.core.search_indexer import index_entity_best_effort, remove_from_index_best_effort
from app.db.creative_assets import create_asset, delete_asset, list_assets

logger = get_logger(__name__)

router = APIRouter(prefix="/assets", tags=["assets"])


def asset_search_text(asset: Asset) -> str:
    """Searchable body of an asset. Media URLs are not worth indexing."""
    parts = [asset.prompt]
    if asset.type in TEXT_ASSET_TYPES:
        parts.append(asset.content)
    return " ".join(p for p in parts if p)


@router.get("", response_model=list[Asset])
def get_assets(auth: AuthContext = Depends(require_auth)):
    """List the caller's assets, newest first."""
    try:
        return list_assets(auth.user_id)
    except Exception as e:
        logger.exception(f"Failed to fetch assets: {e}", extra={"user_id": auth.user_id})
        raise HTTPException(status_code=500, detail="Failed to fetch assets")


@router.post("", response_model=AssetSaveResponse)
def save_asset(
    body: AssetCreate,
    auth: AuthContext = Depends(require_auth),
):
    """Save an asset, then index it."""
    try:
        asset = create_asset(auth.user_id, body)
    except Exception as e:
        logger.exception(f"Failed to save asset: {e}", extra={"user_id": auth.user_id})
        raise HTTPException(status_code=500, detail="Failed to save asset")

    indexed = index_entity_best_effort(
        auth.user_id,
        EntityType.ASSET,
        asset.id,
        asset.title,
        asset_search_text(asset),
        tags=[t for t in (asset.type.value, asset.platform) if t],
    )

    return AssetSaveResponse(asset=asset, indexed=indexed)


@router.delete("/{asset_id}", response_model=AssetDeleteResponse)
def remove_asset(
    asset_id: str,
    auth: AuthContext = Depends(require_auth),
):
    """Delete an asset, then drop it from the index."""
    try:
        delete_asset(auth.user_id, asset_id)
    except Exception as e:
        logger.exception(f"Failed to delete asset: {e}", extra={"user_id": auth.user_id})
        raise HTTPException(status_code=500, detail="Failed to delete asset")

    # Runs even when the asset was already gone, clearing any dangling entry
    indexed = remove_from_index_best_effort(auth.user_id, EntityType.ASSET, asset_id)

    return AssetDeleteResponse(success=True, indexed=indexed)

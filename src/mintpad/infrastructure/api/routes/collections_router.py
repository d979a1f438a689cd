"""Collection settings API routes."""

from fastapi import APIRouter, HTTPException, status

from mintpad.core.logging import get_logger
from mintpad.infrastructure.api.dependencies import AuthenticatedWallet
from mintpad.infrastructure.api.schemas import CollectionResponse, CollectionSettingsRequest

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/settings",
    status_code=status.HTTP_200_OK,
    response_model=CollectionResponse,
)
async def update_settings(
    request: CollectionSettingsRequest, auth: AuthenticatedWallet
) -> CollectionResponse:
    """Apply a settings patch to a collection.

    Only the owner, a collaborator or an admin may edit the settings.
    """
    collection = request.collection.to_entity()

    if not auth.can_manage(collection):
        logger.info(
            "Settings update denied",
            collection_id=collection.id,
            wallet_address=auth.wallet_address,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the collection owner, a collaborator or an admin can edit settings",
        )

    try:
        updated = request.patch.apply(collection)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    logger.info(
        "Collection settings updated",
        collection_id=collection.id,
        fields=sorted(request.patch.model_fields_set),
    )
    return CollectionResponse.from_entity(updated)

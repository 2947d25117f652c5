"""Location masking endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from pawmap_api.config import settings
from pawmap_api.schemas import (
    MaskBatchRequest,
    MaskBatchResponse,
    MaskedLocationResponse,
    MaskRequest,
    PrivacyCircleResponse,
)
from pawmap_geo import mask_location, mask_locations, privacy_circle
from pawmap_geo.types import MaskedLocation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


def _mask(request: MaskRequest) -> MaskedLocation:
    return mask_location(
        request.identifier,
        request.latitude,
        request.longitude,
        request.min_radius_meters,
        request.max_radius_meters,
    )


@router.post("/mask", response_model=MaskedLocationResponse)
async def mask_single(request: MaskRequest) -> MaskedLocationResponse:
    """Mask one location. The same identifier always yields the same result."""
    return MaskedLocationResponse(**_mask(request).to_dict())


@router.post("/mask/batch", response_model=MaskBatchResponse)
async def mask_batch(request: MaskBatchRequest) -> MaskBatchResponse:
    """Mask many locations sharing ring bounds, preserving request order."""
    if len(request.items) > settings.max_batch_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Batch of {len(request.items)} exceeds limit of {settings.max_batch_size}",
        )

    masked = mask_locations(
        ((item.identifier, item.latitude, item.longitude) for item in request.items),
        request.min_radius_meters,
        request.max_radius_meters,
    )
    logger.info("Masked batch of %d locations", len(masked))
    return MaskBatchResponse(
        locations=[MaskedLocationResponse(**location.to_dict()) for location in masked]
    )


@router.post("/privacy-circle", response_model=PrivacyCircleResponse)
async def get_privacy_circle(request: MaskRequest) -> PrivacyCircleResponse:
    """Mask one location and return its uncertainty circle as GeoJSON."""
    return PrivacyCircleResponse(**privacy_circle(_mask(request)))

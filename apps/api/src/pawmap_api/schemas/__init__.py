"""Pydantic schemas for the PawMap geo API."""

from pawmap_api.schemas.location import (
    MaskBatchItem,
    MaskBatchRequest,
    MaskBatchResponse,
    MaskedLocationResponse,
    MaskRequest,
    PrivacyCircleResponse,
)
from pawmap_api.schemas.projection import ProjectRequest, ProjectResponse, RegionSchema

__all__ = [
    "MaskBatchItem",
    "MaskBatchRequest",
    "MaskBatchResponse",
    "MaskRequest",
    "MaskedLocationResponse",
    "PrivacyCircleResponse",
    "ProjectRequest",
    "ProjectResponse",
    "RegionSchema",
]

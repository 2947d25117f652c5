"""Location masking schemas."""

from typing import Any

from pydantic import BaseModel, Field


class MaskRequest(BaseModel):
    """Request model for masking a single location.

    Coordinates are not range-checked here: out-of-range values are clamped
    by the engine so one bad record never fails a map render.
    """

    identifier: str = Field(..., description="Entity id used as the masking seed")
    latitude: float = Field(..., description="True latitude in degrees")
    longitude: float = Field(..., description="True longitude in degrees")
    min_radius_meters: float | None = Field(
        default=None,
        description="Inner ring radius; server default when omitted",
    )
    max_radius_meters: float | None = Field(
        default=None,
        description="Outer ring radius; server default when omitted",
    )


class MaskBatchItem(BaseModel):
    """One record of a batch mask request."""

    identifier: str
    latitude: float
    longitude: float


class MaskBatchRequest(BaseModel):
    """Request model for masking many locations with shared ring bounds."""

    items: list[MaskBatchItem] = Field(default_factory=list)
    min_radius_meters: float | None = None
    max_radius_meters: float | None = None


class MaskedLocationResponse(BaseModel):
    """A masked location and the uncertainty radius to display."""

    latitude: float
    longitude: float
    privacy_radius_meters: float


class MaskBatchResponse(BaseModel):
    """Masked locations in request order."""

    locations: list[MaskedLocationResponse]


class PrivacyCircleResponse(BaseModel):
    """GeoJSON Feature for the disclosed uncertainty circle."""

    type: str = "Feature"
    geometry: dict[str, Any]
    properties: dict[str, Any] = Field(default_factory=dict)

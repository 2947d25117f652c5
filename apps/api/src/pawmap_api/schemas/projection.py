"""Projection schemas - viewport regions and screen positions."""

from pydantic import BaseModel, Field


class RegionSchema(BaseModel):
    """A map viewport."""

    center_latitude: float
    center_longitude: float
    latitude_delta: float = Field(..., description="Vertical span in degrees")
    longitude_delta: float = Field(..., description="Horizontal span in degrees")


class ProjectRequest(BaseModel):
    """Request model for projecting a point into a viewport.

    Pixel coordinates are returned only when both width and height are given.
    """

    region: RegionSchema
    latitude: float
    longitude: float
    width: float | None = Field(default=None, gt=0, description="Viewport width in pixels")
    height: float | None = Field(default=None, gt=0, description="Viewport height in pixels")
    inset: float | None = Field(default=None, ge=0, description="Edge inset in pixels")


class ProjectResponse(BaseModel):
    """Screen position of a projected point."""

    x_fraction: float
    y_fraction: float
    visible: bool
    left: float | None = None
    top: float | None = None

"""Geo-to-screen projection endpoint for the web overlay renderer."""

from fastapi import APIRouter

from pawmap_api.schemas import ProjectRequest, ProjectResponse
from pawmap_geo import is_within_viewport, project_to_screen, to_pixels
from pawmap_geo.types import Region

router = APIRouter(prefix="/projection", tags=["projection"])


@router.post("/screen", response_model=ProjectResponse)
async def project_point(request: ProjectRequest) -> ProjectResponse:
    """Project a point into a viewport.

    Off-screen points keep their unclipped fractions with ``visible`` false;
    pixel positions, when requested, are pinned inside the viewport.
    """
    region = Region.from_center(
        request.region.center_latitude,
        request.region.center_longitude,
        request.region.latitude_delta,
        request.region.longitude_delta,
    )
    fraction = project_to_screen(region, request.latitude, request.longitude)
    response = ProjectResponse(
        x_fraction=fraction.x,
        y_fraction=fraction.y,
        visible=is_within_viewport(fraction),
    )

    if request.width is not None and request.height is not None:
        position = to_pixels(fraction, request.width, request.height, request.inset)
        response.left = position.left
        response.top = position.top

    return response

"""
Health endpoint.

Reports whether the data file is present without reading or parsing
it, so the check stays cheap even for a large document.
"""

from fastapi import APIRouter, Depends

from gallery_api.app.api.deps import get_painting_service
from gallery_api.app.schemas.painting import HealthStatus
from gallery_api.app.services.painting_service import PaintingService

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health(service: PaintingService = Depends(get_painting_service)) -> HealthStatus:
    return HealthStatus(
        status="ok",
        data_file=str(service.data_path),
        data_file_exists=service.data_path.is_file(),
    )

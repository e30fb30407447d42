# manuals_search/api/routes/manuals.py
"""Manual listing routes."""

import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..dependencies import ConfigDep, FolderWalkerDep
from ..errors import error_response
from ..schemas import DebugResponse, ErrorResponse
from ...library.search import filter_manuals
from ...models.manual import Manual

logger = logging.getLogger(__name__)

router = APIRouter()

DEBUG_SAMPLE_SIZE = 3


def _dump(manuals: list[Manual]) -> list[dict]:
    return [m.model_dump(mode="json", exclude_none=True) for m in manuals]


@router.get(
    "",
    response_model=list[Manual],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def list_manuals(
    walker: FolderWalkerDep,
    config: ConfigDep,
    q: Optional[str] = None,
    debug: Optional[str] = None,
):
    """List every manual under the configured root folder."""
    try:
        manuals = await walker.walk(config.drive.folder_id)
    except Exception as e:
        logger.exception("Listing manuals failed")
        return error_response(str(e))

    if debug == "1":
        report = DebugResponse(
            count=len(manuals),
            sample=manuals[:DEBUG_SAMPLE_SIZE],
            env_present={
                "GOOGLE_SERVICE_KEY": bool(config.drive.service_key),
                "GOOGLE_DRIVE_FOLDER_ID": bool(config.drive.folder_id),
            },
        )
        return JSONResponse(
            content=report.model_dump(mode="json", by_alias=True, exclude_none=True)
        )

    if q:
        manuals = filter_manuals(manuals, q)

    return JSONResponse(content=_dump(manuals), headers={"Cache-Control": "no-store"})

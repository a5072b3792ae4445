"""HTTP routes for Status bounded context."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from status.application.services import StatusService
from status.dependencies import get_status_service
from status.presentation.page import render_status_page

router = APIRouter(tags=["status"])


@router.get("/", response_class=HTMLResponse)
async def status_page(
    service: Annotated[StatusService, Depends(get_status_service)],
) -> HTMLResponse:
    """Report connectivity to the cache and the database.

    Always answers 200; backing-store failures show up in the page body.
    The page is never cached, since it reflects live state.
    """
    report = await service.collect()

    return HTMLResponse(
        content=render_status_page(report),
        headers={"Cache-Control": "no-store"},
    )

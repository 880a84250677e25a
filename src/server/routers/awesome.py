"""Awesome list endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from how_awesome.session import SessionStore
from server.models import AwesomeListResponse, ErrorResponse, RateLimitResponse, SectionMetadataResponse
from server.processor import process_awesome_query, process_rate_limit, process_section_metadata

router = APIRouter()

COMMON_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Awesome list or section not found"},
}


def _session(request: Request) -> SessionStore:
    return request.app.state.session


def _error(response: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=response.model_dump())


@router.get("/api/awesome/{owner}/{name}", response_model=AwesomeListResponse, responses=COMMON_RESPONSES)
async def get_awesome_list(owner: str, name: str) -> AwesomeListResponse | JSONResponse:
    """Render an awesome list with annotated sections and repository links.

    **Path Parameters**
    - **owner** (`str`): GitHub owner of the awesome list
    - **name** (`str`): repository name of the awesome list
    """
    response = await process_awesome_query(f"{owner}/{name}")
    if isinstance(response, ErrorResponse):
        return _error(response)
    return response


@router.get(
    "/api/awesome/{owner}/{name}/sections/{slug}/metadata",
    response_model=SectionMetadataResponse,
    responses=COMMON_RESPONSES,
)
async def get_section_metadata(
    request: Request,
    owner: str,
    name: str,
    slug: str,
) -> SectionMetadataResponse | JSONResponse:
    """Fetch GitHub metadata for every repository of one section."""
    response = await process_section_metadata(f"{owner}/{name}", slug, session=_session(request))
    if isinstance(response, ErrorResponse):
        return _error(response)
    return response


@router.get("/api/ratelimit", response_model=RateLimitResponse)
async def get_rate_limit(request: Request, refresh: bool = False) -> RateLimitResponse:
    """Return the GitHub API budget tracked for this session."""
    return await process_rate_limit(session=_session(request), refresh=refresh)

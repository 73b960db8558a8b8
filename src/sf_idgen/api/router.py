"""sf_idgen REST endpoints.

GET /ids/next             — one new id
GET /ids?count=N          — N new ids, strictly increasing
GET /ids/worker           — worker identity and bit layout
GET /ids/{snowflake_id}   — decode an id into its fields
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.sf_common.response import ApiResponse, success_response
from src.sf_idgen.application.service import IdGeneratorService, get_id_worker
from src.sf_idgen.engine.worker import IdWorker

router = APIRouter(prefix="/ids", tags=["ids"])

_service = IdGeneratorService()


def _get_request_id(request: Request) -> str | None:
    """Read request_id injected by RequestLogMiddleware, if any."""
    return getattr(request.state, "request_id", None)


@router.get("/next", response_model=ApiResponse, summary="Generate one id")
async def next_id(
    request: Request,
    worker: Annotated[IdWorker, Depends(get_id_worker)],
) -> ApiResponse:
    result = _service.next_id(worker)
    return success_response(result.model_dump(), _get_request_id(request))


# Sync handler: runs in the threadpool, off the event loop.
@router.get("", response_model=ApiResponse, summary="Generate a batch of ids")
def next_batch(
    request: Request,
    worker: Annotated[IdWorker, Depends(get_id_worker)],
    count: int = Query(1, description="Number of ids to generate"),
) -> ApiResponse:
    result = _service.next_batch(worker, count)
    return success_response(result.model_dump(), _get_request_id(request))


@router.get("/worker", response_model=ApiResponse, summary="Worker identity")
async def worker_info(
    request: Request,
    worker: Annotated[IdWorker, Depends(get_id_worker)],
) -> ApiResponse:
    result = _service.worker_info(worker)
    return success_response(result.model_dump(), _get_request_id(request))


@router.get("/{snowflake_id}", response_model=ApiResponse, summary="Decode an id")
async def decode_id(
    snowflake_id: int,
    request: Request,
    worker: Annotated[IdWorker, Depends(get_id_worker)],
) -> ApiResponse:
    result = _service.decode(worker, snowflake_id)
    return success_response(result.model_dump(), _get_request_id(request))

from fastapi import APIRouter, Depends

from backend.app.api.schemas import (
    TraverseRequest,
    TraverseResponse,
    UnreachableRequest,
    UnreachableResponse,
    UnreachableResult,
)
from backend.app.dependencies import get_decay_service
from backend.app.services.decay_service import DecayService

router = APIRouter()


@router.post("/traverse", response_model=TraverseResponse)
def traverse(
    request: TraverseRequest,
    service: DecayService = Depends(get_decay_service),
):
    return TraverseResponse(**service.traverse(request.start))


@router.post("/unreachable", response_model=UnreachableResponse)
def unreachable(
    request: UnreachableRequest,
    service: DecayService = Depends(get_decay_service),
):
    results = service.run_query_line(request.queries)
    return UnreachableResponse(
        results=[UnreachableResult(**result) for result in results],
    )

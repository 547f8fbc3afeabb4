from fastapi import APIRouter, Depends

from backend.app.api.schemas import (
    BuildRequest,
    GraphResponse,
    GraphStatsResponse,
    NeighborsResponse,
)
from backend.app.dependencies import get_decay_service
from backend.app.services.decay_service import DecayService

router = APIRouter()


@router.post("/build", response_model=GraphResponse)
def build_graph(
    request: BuildRequest,
    service: DecayService = Depends(get_decay_service),
):
    return GraphResponse(**service.build(request.edges))


@router.get("/", response_model=GraphResponse)
def graph_export(service: DecayService = Depends(get_decay_service)):
    return GraphResponse(**service.snapshot())


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(service: DecayService = Depends(get_decay_service)):
    snapshot = service.snapshot()
    return GraphStatsResponse(
        vertices=snapshot["vertices"],
        edges=snapshot["edges"],
        labels=list(snapshot["adjacency"]),
    )


@router.get("/neighbors/{vertex}", response_model=NeighborsResponse)
def graph_neighbors(
    vertex: str,
    service: DecayService = Depends(get_decay_service),
):
    return NeighborsResponse(vertex=vertex, neighbors=service.neighbors(vertex))

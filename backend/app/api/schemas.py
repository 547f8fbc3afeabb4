from typing import List, Dict
from pydantic import BaseModel


class BuildRequest(BaseModel):
    edges: str


class GraphResponse(BaseModel):
    graph: str
    vertices: int
    edges: int
    adjacency: Dict[str, str]


class GraphStatsResponse(BaseModel):
    vertices: int
    edges: int
    labels: List[str]


class NeighborsResponse(BaseModel):
    vertex: str
    neighbors: str


class TraverseRequest(BaseModel):
    start: str


class TraverseResponse(BaseModel):
    start: str
    order: str
    distances: str
    table: Dict[int, str]


class UnreachableRequest(BaseModel):
    queries: str


class UnreachableResult(BaseModel):
    start: str
    expiration: int
    count: int
    message: str


class UnreachableResponse(BaseModel):
    results: List[UnreachableResult]

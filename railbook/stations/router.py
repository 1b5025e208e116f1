from fastapi import APIRouter, Query
from typing import List
from railbook.exceptions import NotFound
from railbook.stations.schemas import Station, StationSearchResult
from railbook.stations.service import StationService

router = APIRouter()

@router.get("/", response_model=List[Station])
def list_stations():
    """List every station in the directory"""
    return StationService.all_stations()

@router.get("/search", response_model=StationSearchResult)
def search_stations(
    q: str = Query(..., description="Search query"),
    limit: int = Query(8, ge=1, le=50, description="Maximum number of results")
):
    """Search stations by name, city or code for autocomplete"""
    stations = StationService.search_stations(q, limit=limit)
    return StationSearchResult(query=q, stations=stations, total=len(stations))

@router.get("/{code}", response_model=Station)
def get_station(code: str):
    """Get a station by its code"""
    station = StationService.get_station_by_code(code)
    if not station:
        raise NotFound("Station not found")
    return station

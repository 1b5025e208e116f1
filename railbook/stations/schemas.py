from pydantic import BaseModel
from typing import List

class Station(BaseModel):
    code: str
    name: str
    city: str
    state: str

class StationSearchResult(BaseModel):
    query: str
    stations: List[Station]
    total: int

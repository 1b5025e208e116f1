from typing import List, Optional
from railbook.stations.data import INDIAN_RAILWAY_STATIONS
from railbook.stations.schemas import Station

MIN_QUERY_LENGTH = 2

class StationService:
    """Static station directory used for autocomplete"""

    _stations: List[Station] = [
        Station(code=code, name=name, city=city, state=state)
        for code, name, city, state in INDIAN_RAILWAY_STATIONS
    ]

    @staticmethod
    def all_stations() -> List[Station]:
        return list(StationService._stations)

    @staticmethod
    def get_station_by_code(code: str) -> Optional[Station]:
        code = (code or "").strip().upper()
        return next((s for s in StationService._stations if s.code == code), None)

    @staticmethod
    def search_stations(query: str, limit: int = 8) -> List[Station]:
        """Match name, city or code as a case-insensitive substring"""
        term = (query or "").strip().lower()
        if len(term) < MIN_QUERY_LENGTH:
            return []

        matches = [
            s for s in StationService._stations
            if term in s.name.lower() or term in s.city.lower() or term in s.code.lower()
        ]
        return matches[:limit]

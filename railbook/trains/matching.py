from sqlalchemy import func
from sqlalchemy.orm import Query


class StationMatcher:
    """Policy for matching free-text station input against a station column"""

    def apply(self, query: Query, column, text: str) -> Query:
        text = (text or "").strip()
        if not text:
            return query
        return query.filter(self.criterion(column, text))

    def criterion(self, column, text: str):
        raise NotImplementedError


class SubstringStationMatcher(StationMatcher):
    """Case-insensitive substring match, e.g. 'delhi' matches 'New Delhi'"""

    def criterion(self, column, text: str):
        escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return column.ilike(f"%{escaped}%", escape="\\")


class ExactStationMatcher(StationMatcher):
    """Case-insensitive whole-name match"""

    def criterion(self, column, text: str):
        return func.lower(column) == text.lower()


MATCHERS = {
    "substring": SubstringStationMatcher,
    "exact": ExactStationMatcher,
}


def get_station_matcher(mode: str = "substring") -> StationMatcher:
    try:
        return MATCHERS[mode]()
    except KeyError:
        raise ValueError(f"Unknown station match mode: {mode}")

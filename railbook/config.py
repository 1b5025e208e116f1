from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Database
    PGHOST: str = "localhost"
    PGDATABASE: str = "railbook"
    PGUSER: str = "postgres"
    PGPASSWORD: str = ""
    PGSSLMODE: str = "prefer"
    DATABASE_URL: Optional[str] = None

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Application
    PROJECT_NAME: str = "Railway Ticket Booking System"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Booking & fare engine
    UNKNOWN_CLASS_POLICY: str = "default"  # "default" (x1.0) or "reject"
    STATION_MATCH_MODE: str = "substring"  # "substring" or "exact"
    PNR_LENGTH: int = 10
    PNR_MAX_ATTEMPTS: int = 5
    SEAT_SLOTS_PER_CLASS: int = 72

    # Live status
    JOURNEY_PROGRESS_MODE: str = "fixed"  # "fixed" or "elapsed"
    FIXED_JOURNEY_PROGRESS: int = 65
    STATUS_REFRESH_SECONDS: int = 30

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.PGUSER}:{self.PGPASSWORD}@{self.PGHOST}/{self.PGDATABASE}?sslmode={self.PGSSLMODE}"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

"""Configuration settings for the moveframe engine."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]
IconType = Literal["emoji", "icon"]


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    # Display preference handed to the UI, never read by the core
    SPORT_ICON_TYPE: IconType = "emoji"

    # Circuit planner defaults
    DEFAULT_PAUSE_STATIONS: str = '10"'

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        origins = os.getenv("CORS_ORIGINS")
        if origins:
            self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.CORS_ORIGINS = list(Settings.CORS_ORIGINS)

        icon_type = os.getenv("SPORT_ICON_TYPE", "emoji").lower()
        self.SPORT_ICON_TYPE = icon_type if icon_type in ("emoji", "icon") else "emoji"  # type: ignore

        self.DEFAULT_PAUSE_STATIONS = os.getenv("DEFAULT_PAUSE_STATIONS", '10"')


settings = Settings()

"""
Runtime settings for the planner core.

Values come from environment variables (a local .env file is honoured via
python-dotenv). Everything has a default so the core works with no
configuration at all.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

DEFAULT_GUEST_COUNT = 50
DEFAULT_CATEGORY_LABEL = "Other"
DEFAULT_LOG_LEVEL = "INFO"


class PlannerSettings(BaseModel):
    default_guest_count: int = Field(DEFAULT_GUEST_COUNT, ge=1)
    default_category_label: str = Field(DEFAULT_CATEGORY_LABEL, min_length=1)
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> PlannerSettings:
    """
    Build PlannerSettings from the environment.

    Raises:
        ValueError: if a variable is set to something unusable
            (e.g. a guest count of 0 or an unknown log level).
    """
    load_dotenv()

    raw = {
        "default_guest_count": os.getenv("PLANNER_DEFAULT_GUEST_COUNT", DEFAULT_GUEST_COUNT),
        "default_category_label": os.getenv(
            "PLANNER_DEFAULT_CATEGORY_LABEL", DEFAULT_CATEGORY_LABEL
        ),
        "log_level": os.getenv("PLANNER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    }
    try:
        settings = PlannerSettings(**raw)
    except ValidationError as e:
        raise ValueError(f"Invalid planner configuration: {e}") from e

    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ValueError(f"Invalid planner configuration: unknown log level {settings.log_level!r}")
    return settings


def configure_logging(settings: Optional[PlannerSettings] = None) -> None:
    """Configure root logging for an embedding application or script."""
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

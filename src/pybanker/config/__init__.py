"""Configuration helpers for course data and engine settings."""

from .courses import get_course, iter_courses
from .settings import EngineSettings, load_settings

__all__ = [
    "EngineSettings",
    "get_course",
    "iter_courses",
    "load_settings",
]

"""Pydantic models for application settings"""

from aliasargs.models.settings import CliSettings

__all__ = [
    'CliSettings'
]

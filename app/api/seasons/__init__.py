"""Seasons API package."""

from app.api.seasons.router import router

__all__ = ["router"]

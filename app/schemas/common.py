"""Common response schemas shared across endpoints."""

from pydantic import BaseModel


class TeamBrief(BaseModel):
    id: int
    name: str
    logo: str | None = None

    class Config:
        from_attributes = True


class SeasonBrief(BaseModel):
    id: int
    name: str
    year: int | None = None

    class Config:
        from_attributes = True

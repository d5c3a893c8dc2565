from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class StravaDetailedActivity(BaseModel):
    """Activity as returned by ``PUT /activities/{id}``.

    Only the fields the tools read are typed; the full response body is kept in ``raw``.
    """

    id: int
    name: str
    type: str
    sport_type: str
    start_date: datetime | None = None
    start_date_local: datetime  # Local wall time; Strava still suffixes it with "Z"
    timezone: str | None = None
    distance: float | None = None
    moving_time: int | None = None
    elapsed_time: int | None = None
    total_elevation_gain: float | None = None
    description: str | None = None
    private: bool = False
    commute: bool = False
    trainer: bool = False
    gear_id: str | None = None

    raw: dict | None = None  # Store raw API response (may contain nested dicts and lists)


def parse_detailed_activity(payload: dict) -> StravaDetailedActivity:
    return StravaDetailedActivity(**payload, raw=payload)

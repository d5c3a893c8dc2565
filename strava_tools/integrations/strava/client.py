from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from strava_tools.config.settings import load_settings
from strava_tools.integrations.strava.schemas import StravaDetailedActivity, parse_detailed_activity


class StravaAPIError(Exception):
    """Non-2xx response from the Strava API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Strava API error {status_code}: {message}")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return str(body)


async def update_activity(
    access_token: str,
    activity_id: int,
    payload: dict[str, Any],
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StravaDetailedActivity:
    """Update an activity with a sparse payload and return the full updated record.

    One request, no retry. ``gear_id: None`` in the payload is sent as JSON null,
    which Strava treats as "remove gear".

    Raises:
        StravaAPIError: If Strava answers with a non-2xx status
        httpx.HTTPError: On transport failures (timeouts, connection errors)
    """
    if base_url is None or timeout is None:
        current = load_settings()
        base_url = base_url or current.strava_api_base_url
        timeout = timeout or current.strava_http_timeout

    url = f"{base_url}/activities/{activity_id}"
    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/json",
    }

    logger.debug(f"PUT {url} fields={sorted(payload)}")

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.put(url, headers=headers, json=payload)

    if response.is_error:
        raise StravaAPIError(response.status_code, _error_message(response))

    return parse_detailed_activity(response.json())

"""Update a Strava activity.

WRITE: sends a sparse update for one activity and reports the updated record.
Only the fields the caller supplied are sent; an omitted field is left
unchanged on Strava. ``gearId: null`` is the one meaningful null and removes
the gear association.
"""

import math
from collections.abc import Awaitable, Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError, field_validator

from strava_tools.config.settings import load_settings
from strava_tools.integrations.strava import client as strava_client
from strava_tools.integrations.strava.client import StravaAPIError
from strava_tools.integrations.strava.schemas import StravaDetailedActivity, parse_detailed_activity
from strava_tools.tools.catalog import ToolSpec, ValidationResult
from strava_tools.tools.errors import ConfigurationError
from strava_tools.tools.results import ToolResult

UpdateFn = Callable[[str, int, dict[str, Any]], Awaitable[StravaDetailedActivity | dict[str, Any]]]

# Input field name -> Strava API field name
PAYLOAD_FIELD_NAMES: dict[str, str] = {
    "name": "name",
    "type": "type",
    "sport_type": "sport_type",
    "description": "description",
    "is_private": "private",
    "is_commute": "commute",
    "gear_id": "gear_id",
}

NOT_FOUND_MARKERS = ("Record Not Found", "404")


class UpdateActivityInput(BaseModel):
    """Arguments of the update-activity tool.

    Which optional fields were supplied is read from ``model_fields_set``, so
    "absent" and "explicit null" stay distinct for ``gear_id``.
    """

    model_config = ConfigDict(extra="ignore")

    activity_id: StrictInt = Field(
        alias="activityId",
        gt=0,
        description="The unique identifier of the activity to update.",
    )
    name: StrictStr | None = Field(default=None, description="The updated name of the activity.")
    type: StrictStr | None = Field(
        default=None,
        description="The updated type of the activity ('Run', 'Ride', etc.).",
    )
    sport_type: StrictStr | None = Field(
        default=None,
        alias="sportType",
        description="The updated sport type of the activity ('running', 'cycling', etc.).",
    )
    description: StrictStr | None = Field(default=None, description="The updated description of the activity.")
    is_private: StrictBool | None = Field(
        default=None,
        alias="private",
        description="Whether the activity should be private (true) or public (false).",
    )
    is_commute: StrictBool | None = Field(
        default=None,
        alias="commute",
        description="Whether the activity is a commute (true) or not (false).",
    )
    gear_id: StrictStr | None = Field(
        default=None,
        alias="gearId",
        description="The gear ID to associate with the activity, or null to remove gear association.",
    )

    @field_validator("name", "type", "sport_type", "description", "is_private", "is_commute", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but cannot be null")
        return value


def safe_parse_update_input(arguments: Any) -> ValidationResult:
    """Validate raw tool arguments; failures are returned, not raised."""
    return UPDATE_ACTIVITY_TOOL.safe_parse(arguments)


def build_update_payload(request: UpdateActivityInput) -> dict[str, Any]:
    """Map explicitly supplied fields to Strava field names.

    ``is_commute=False`` is sent as ``commute: False``; an unset field has no key.
    """
    return {
        api_name: getattr(request, field_name)
        for field_name, api_name in PAYLOAD_FIELD_NAMES.items()
        if field_name in request.model_fields_set
    }


async def execute_update(
    access_token: str | None,
    activity_id: int,
    payload: dict[str, Any],
    update_fn: UpdateFn,
) -> StravaDetailedActivity:
    """Run the update call once.

    Raises:
        ConfigurationError: If no access token is available (no call is made)
    """
    if not access_token:
        raise ConfigurationError("STRAVA_ACCESS_TOKEN", "Missing Strava access token.")

    updated = await update_fn(access_token, activity_id, payload)
    if isinstance(updated, dict):
        updated = parse_detailed_activity(updated)
    return updated


def _format_km(meters: float) -> str:
    """Meters as kilometers with two decimals, ties rounded up."""
    kilometers = Decimal(meters / 1000).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{kilometers} km"


def _format_elevation(meters: float) -> str:
    # ties round up
    return f"{math.floor(Decimal(meters) + Decimal('0.5'))} m"


def format_activity_details(activity: StravaDetailedActivity) -> str:
    date = activity.start_date_local.strftime("%Y-%m-%d %H:%M:%S")
    distance = _format_km(activity.distance) if activity.distance else "N/A"
    elevation = _format_elevation(activity.total_elevation_gain) if activity.total_elevation_gain else "N/A"

    details = f"🏃 **{activity.name}** (ID: {activity.id})\n"
    details += f"   - Type: {activity.type} ({activity.sport_type})\n"
    details += f"   - Date: {date}\n"
    if activity.distance is not None:
        details += f"   - Distance: {distance}\n"
    if activity.total_elevation_gain is not None:
        details += f"   - Elevation Gain: {elevation}\n"
    if activity.description:
        details += f"   - Description: {activity.description}\n"
    details += f"   - Private: {'Yes' if activity.private else 'No'}\n"
    details += f"   - Commute: {'Yes' if activity.commute else 'No'}\n"

    return details


def is_not_found_error(error: Exception) -> bool:
    """Status code when the error carries one, message text otherwise."""
    if isinstance(error, StravaAPIError):
        return error.status_code == 404
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code == 404
    message = str(error)
    return any(marker in message for marker in NOT_FOUND_MARKERS)


def classify_update_error(error: Exception, activity_id: int) -> str:
    if is_not_found_error(error):
        return f"Activity with ID {activity_id} not found or you don't have permission to update it."
    return f"An unexpected error occurred while updating activity ID {activity_id}. Details: {error}"


async def update_activity(
    request: UpdateActivityInput,
    *,
    access_token: str | None = None,
    update_fn: UpdateFn | None = None,
) -> ToolResult:
    """Update one activity and describe the result.

    Args:
        request: Validated tool arguments
        access_token: Strava token; read from settings when not given
        update_fn: Update call, defaults to the Strava HTTP client

    Returns:
        ToolResult; errors are reported with ``is_error=True``, never raised
    """
    activity_id = request.activity_id
    if update_fn is None:
        update_fn = strava_client.update_activity

    token_source = "access_token argument"
    if access_token is None:
        token_source = "STRAVA_ACCESS_TOKEN"
        try:
            access_token = load_settings().strava_access_token
        except ValidationError as e:
            fields = ", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"])
            logger.error(f"Invalid settings while updating activity {activity_id}: {fields}")
            return ToolResult.failure(f"❌ Configuration error: Invalid settings ({fields}).")

    try:
        logger.info(f"Updating activity ID: {activity_id}...")
        payload = build_update_payload(request)
        updated = await execute_update(access_token, activity_id, payload, update_fn)
        details = format_activity_details(updated)
    except ConfigurationError as e:
        logger.error(f"{e.message} Checked {token_source}.")
        return ToolResult.failure(f"❌ Configuration error: {e.message}")
    except Exception as e:
        logger.error(f"Error updating activity {activity_id}: {e}")
        return ToolResult.failure(f"❌ {classify_update_error(e, activity_id)}")

    logger.info(f"Successfully updated activity: {updated.name}")
    return ToolResult.success(f"✅ Successfully updated activity ID {activity_id}.\n\n{details}")


UPDATE_ACTIVITY_TOOL = ToolSpec(
    name="update-activity",
    description=(
        "Updates properties of a specific activity using its ID. You can update the name, type, "
        "sport_type, description, privacy setting, commute flag, or gear_id."
    ),
    input_model=UpdateActivityInput,
    execute=update_activity,
)

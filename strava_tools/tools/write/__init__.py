"""Write tools.

These tools modify records on Strava on behalf of the athlete.
"""

from strava_tools.tools.write.update_activity import UPDATE_ACTIVITY_TOOL, update_activity

__all__ = [
    "UPDATE_ACTIVITY_TOOL",
    "update_activity",
]

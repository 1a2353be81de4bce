"""Team-related MCP tools."""
from typing import List

from ..config import connection_from_env, mcp
from ..services import teams
from ..utils.helpers import unwrap


@mcp.tool()
def get_teams() -> List[str]:
    """List the team names of the configured project."""
    return unwrap(teams.get_teams(connection_from_env()))


@mcp.tool()
def get_team_members(team: str) -> List[str]:
    """List the display names of a team's members. Use `get_teams` for valid team names."""
    return unwrap(teams.get_team_members(connection_from_env(), team))

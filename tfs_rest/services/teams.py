"""Team endpoints."""
from typing import List

from ..client import collection_url, get_json
from ..config import TfsConnection
from ..results import returns_result
from ..utils.helpers import as_object, require, values


@returns_result
def get_teams(conn: TfsConnection) -> List[str]:
    """Names of the teams in the project."""
    data = get_json(conn, collection_url(conn, "projects", conn.project, "teams"))
    return [team.get("name") for team in values(data)]


@returns_result
def get_team_members(conn: TfsConnection, team: str) -> List[str]:
    """Display names of a team's members."""
    require(team, "team")
    data = get_json(conn, collection_url(conn, "projects", conn.project, "teams", team, "members"))
    members = []
    for member in values(data):
        # newer servers nest the identity under "identity"
        identity = as_object(member.get("identity") or member, "team member")
        members.append(identity.get("displayName"))
    return members

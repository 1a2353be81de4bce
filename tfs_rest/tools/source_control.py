"""TFVC changeset and shelveset MCP tools."""
from typing import Any, Dict, List, Optional

from ..config import connection_from_env, mcp
from ..services import changesets, shelvesets
from ..utils.helpers import unwrap


@mcp.tool()
def get_changeset(changeset_id: int) -> Dict[str, Any]:
    """Return a TFVC changeset: author, date, comment."""
    return unwrap(changesets.get_changeset(connection_from_env(), changeset_id))


@mcp.tool()
def get_latest_changeset_id(item_path: Optional[str] = None) -> Optional[int]:
    """
    Return the id of the newest changeset.

    Parameters:
    -----------
    item_path : str, optional
        Server path to restrict the search to, e.g. "$/Project/Main".
        Defaults to the whole configured project.
    """
    return unwrap(changesets.get_latest_changeset_id(connection_from_env(), item_path))


@mcp.tool()
def get_changeset_changes(changeset_id: int) -> List[Dict[str, Any]]:
    """List the files touched by a changeset as {path, changeType}."""
    return unwrap(changesets.get_changeset_changes(connection_from_env(), changeset_id))


@mcp.tool()
def get_shelveset_work_items(name: str, owner: str) -> List[int]:
    """
    Return the ids of the work items linked to a shelveset.

    Parameters:
    -----------
    name : str
        The shelveset name.
    owner : str
        Account name of the shelveset owner, e.g. "DOMAIN\\jdoe".
    """
    return unwrap(shelvesets.get_shelveset_work_items(connection_from_env(), name, owner))

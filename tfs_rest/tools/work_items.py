"""Work item-related MCP tools."""
from typing import Any, Dict

from ..config import connection_from_env, mcp
from ..services import work_items
from ..utils.helpers import unwrap


@mcp.tool()
def get_work_item(work_item_id: int) -> Dict[str, Any]:
    """
    Fetch a work item with all of its fields.

    Parameters:
    -----------
    work_item_id : int
        REQUIRED. The numeric work item id.

    Returns:
    --------
    Dict[str, Any]
        The raw TFS work item: id, rev, fields (keyed by reference name such
        as "System.Title" or "System.State") and url.
    """
    return unwrap(work_items.get_work_item(connection_from_env(), work_item_id))


@mcp.tool()
def update_work_item_field(work_item_id: int, field: str, value: str) -> int:
    """
    Set a single field on a work item.

    Parameters:
    -----------
    work_item_id : int
        REQUIRED. The work item to update.

    field : str
        REQUIRED. Field reference name, e.g. "System.State", "System.AssignedTo",
        "Microsoft.VSTS.Common.Priority".

    value : str
        REQUIRED. The new value.

    Returns:
    --------
    int
        The id of the updated work item.
    """
    return unwrap(work_items.update_work_item_field(connection_from_env(), work_item_id, field, value))


@mcp.tool()
def add_work_item_comment(work_item_id: int, text: str) -> int:
    """Add a discussion comment to a work item and return the new revision."""
    return unwrap(work_items.add_work_item_comment(connection_from_env(), work_item_id, text))

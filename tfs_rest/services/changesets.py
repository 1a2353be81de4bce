"""TFVC changeset endpoints."""
from typing import Any, Dict, List, Optional

from ..client import collection_url, get_json
from ..config import TfsConnection
from ..results import returns_result
from ..utils.helpers import ResourceId, as_object, require, values


def changes_summary(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce TFVC change entries to the server path and change type."""
    return [
        {
            "path": as_object(change.get("item") or {}, "change item").get("path"),
            "changeType": change.get("changeType"),
        }
        for change in items
    ]


@returns_result
def get_changeset(conn: TfsConnection, changeset_id: ResourceId) -> Dict[str, Any]:
    require(changeset_id, "changeset_id")
    return as_object(get_json(conn, collection_url(conn, "tfvc", "changesets", changeset_id)))


@returns_result
def get_latest_changeset_id(conn: TfsConnection, item_path: Optional[str] = None) -> Optional[int]:
    """
    Id of the newest changeset in the project, or under ``item_path`` when given.

    item_path is a server path like ``$/Project/Main``. Returns None when no
    changeset matches.
    """
    params: Dict[str, Any] = {
        "searchCriteria.itemPath": item_path or f"$/{conn.project}",
        "$top": 1,
    }
    data = get_json(conn, collection_url(conn, "tfvc", "changesets"), params=params)
    changesets = values(data)
    if not changesets:
        return None
    return changesets[0].get("changesetId")


@returns_result
def get_changeset_changes(conn: TfsConnection, changeset_id: ResourceId) -> List[Dict[str, Any]]:
    require(changeset_id, "changeset_id")
    data = get_json(conn, collection_url(conn, "tfvc", "changesets", changeset_id, "changes"))
    return changes_summary(values(data))


@returns_result
def get_changeset_work_items(conn: TfsConnection, changeset_id: ResourceId) -> List[int]:
    """Ids of the work items associated with a changeset."""
    require(changeset_id, "changeset_id")
    data = get_json(conn, collection_url(conn, "tfvc", "changesets", changeset_id, "workItems"))
    return [item.get("id") for item in values(data)]

"""Work item endpoints."""
from typing import Any, Dict, Optional

from ..client import collection_url, get_json, patch_json
from ..config import TfsConnection
from ..results import returns_result
from ..utils.helpers import ResourceId, as_object, field, require

JSON_PATCH = "application/json-patch+json"


def _work_item(conn: TfsConnection, work_item_id: ResourceId) -> Dict[str, Any]:
    require(work_item_id, "work_item_id")
    return as_object(get_json(conn, collection_url(conn, "wit", "workitems", work_item_id)))


def _field_value(conn: TfsConnection, work_item_id: ResourceId, name: str) -> Any:
    fields = _work_item(conn, work_item_id).get("fields") or {}
    return as_object(fields, "'fields'").get(name)


def _patch(conn: TfsConnection, work_item_id: ResourceId, operations: list) -> Dict[str, Any]:
    require(work_item_id, "work_item_id")
    return patch_json(
        conn,
        collection_url(conn, "wit", "workitems", work_item_id),
        operations,
        content_type=JSON_PATCH,
    )


@returns_result
def get_work_item(conn: TfsConnection, work_item_id: ResourceId) -> Dict[str, Any]:
    return _work_item(conn, work_item_id)


@returns_result
def get_work_item_field(conn: TfsConnection, work_item_id: ResourceId, name: str) -> Optional[Any]:
    """
    Value of one field by reference name (e.g. ``System.AssignedTo``).

    Returns None when the field is not set on the work item; TFS omits empty
    fields from the response.
    """
    require(name, "name")
    return _field_value(conn, work_item_id, name)


@returns_result
def get_work_item_title(conn: TfsConnection, work_item_id: ResourceId) -> Optional[str]:
    return _field_value(conn, work_item_id, "System.Title")


@returns_result
def get_work_item_state(conn: TfsConnection, work_item_id: ResourceId) -> Optional[str]:
    return _field_value(conn, work_item_id, "System.State")


@returns_result
def update_work_item_field(
    conn: TfsConnection,
    work_item_id: ResourceId,
    name: str,
    value: Any,
) -> int:
    """Set one field and return the work item id."""
    require(name, "name")
    # Azure DevOps uses JSON Patch format for work item operations
    operations = [
        {
            "op": "add",
            "path": f"/fields/{name}",
            "value": value,
        }
    ]
    return field(_patch(conn, work_item_id, operations), "id")


@returns_result
def add_work_item_comment(conn: TfsConnection, work_item_id: ResourceId, text: str) -> int:
    """Append a discussion comment; returns the new revision number."""
    require(text, "text")
    operations = [
        {
            "op": "add",
            "path": "/fields/System.History",
            "value": text,
        }
    ]
    return field(_patch(conn, work_item_id, operations), "rev")

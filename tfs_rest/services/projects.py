"""Team project endpoints."""
from typing import Any, Dict

from ..client import collection_url, get_json
from ..config import TfsConnection
from ..results import returns_result
from ..utils.helpers import as_object, field


def _project(conn: TfsConnection) -> Dict[str, Any]:
    return as_object(get_json(conn, collection_url(conn, "projects", conn.project)))


@returns_result
def get_project(conn: TfsConnection) -> Dict[str, Any]:
    return _project(conn)


@returns_result
def get_project_id(conn: TfsConnection) -> str:
    """GUID of the connection's team project."""
    return field(_project(conn), "id")

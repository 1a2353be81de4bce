"""Build and build definition endpoints."""
import json
from typing import Any, Dict, List, Optional

from ..client import DecodeError, get_json, patch_json, post_json, project_url
from ..config import TfsConnection
from ..results import returns_result
from ..utils.helpers import ResourceId, as_object, field, find_id_by_name, id_and_name, require, values

IN_PROGRESS = "inProgress"


def _build(conn: TfsConnection, build_id: ResourceId) -> Dict[str, Any]:
    require(build_id, "build_id")
    return as_object(get_json(conn, project_url(conn, "build", "builds", build_id)))


@returns_result
def get_build(conn: TfsConnection, build_id: ResourceId) -> Dict[str, Any]:
    """Full build object."""
    return _build(conn, build_id)


@returns_result
def get_build_status(conn: TfsConnection, build_id: ResourceId) -> str:
    """Build status, e.g. ``inProgress``, ``completed``, ``notStarted``."""
    status = field(_build(conn, build_id), "status")
    if not isinstance(status, str) or not status:
        raise DecodeError(f"build {build_id} has no usable status: {status!r}")
    return status


@returns_result
def get_build_result(conn: TfsConnection, build_id: ResourceId) -> Optional[str]:
    """Build result (``succeeded``, ``failed`` ...), None while the build runs."""
    return _build(conn, build_id).get("result")


@returns_result
def get_latest_build(conn: TfsConnection, definition_id: ResourceId) -> Optional[Dict[str, Any]]:
    """Most recent build of a definition, None if it never ran."""
    require(definition_id, "definition_id")
    data = get_json(
        conn,
        project_url(conn, "build", "builds"),
        params={"definitions": definition_id, "$top": 1},
    )
    builds = values(data)
    return builds[0] if builds else None


def _queue(conn: TfsConnection, body: Dict[str, Any]) -> int:
    data = post_json(conn, project_url(conn, "build", "builds"), body)
    return field(data, "id")


@returns_result
def queue_build(
    conn: TfsConnection,
    definition_id: ResourceId,
    source_branch: Optional[str] = None,
    parameters: Optional[Dict[str, Any]] = None,
) -> int:
    """
    Queue a build of a definition and return the new build id.

    parameters are the definition's queue-time variables; TFS expects them as
    a JSON-encoded string inside the request body.
    """
    require(definition_id, "definition_id")
    body: Dict[str, Any] = {"definition": {"id": definition_id}}
    if source_branch:
        body["sourceBranch"] = source_branch
    if parameters:
        body["parameters"] = json.dumps(parameters)
    return _queue(conn, body)


@returns_result
def queue_shelveset_build(
    conn: TfsConnection,
    definition_id: ResourceId,
    shelveset: str,
    owner: str,
) -> int:
    """Queue a gated/private build of a TFVC shelveset."""
    require(definition_id, "definition_id")
    require(shelveset, "shelveset")
    require(owner, "owner")
    body = {
        "definition": {"id": definition_id},
        "sourceBranch": f"{shelveset};{owner}",
    }
    return _queue(conn, body)


@returns_result
def cancel_build(conn: TfsConnection, build_id: ResourceId) -> str:
    require(build_id, "build_id")
    data = patch_json(
        conn,
        project_url(conn, "build", "builds", build_id),
        {"status": "Cancelling"},
    )
    return field(data, "status")


def _definitions(conn: TfsConnection, name: Optional[str] = None) -> List[Dict[str, Any]]:
    params = {"name": name} if name else None
    return values(get_json(conn, project_url(conn, "build", "definitions"), params=params))


@returns_result
def get_build_definitions(conn: TfsConnection) -> List[Dict[str, Any]]:
    """All build definitions of the project as ``{id, name}``."""
    return id_and_name(_definitions(conn))


@returns_result
def get_build_definition_id(conn: TfsConnection, name: str) -> Optional[int]:
    """Id of the definition called exactly ``name``; None when there is none."""
    require(name, "name")
    return find_id_by_name(_definitions(conn, name), name)

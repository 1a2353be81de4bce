"""TFVC shelveset endpoints.

A shelveset is addressed by its name plus the owner's account name; TFS
expects the pair joined as ``name;owner`` in the ``shelvesetId`` parameter.
"""
from typing import Any, Dict, List

from ..client import collection_url, get_json
from ..config import TfsConnection
from ..results import returns_result
from ..utils.helpers import as_object, require, values
from .changesets import changes_summary


def _shelveset_params(name: str, owner: str) -> Dict[str, str]:
    require(name, "name")
    require(owner, "owner")
    return {"shelvesetId": f"{name};{owner}"}


@returns_result
def get_shelveset(conn: TfsConnection, name: str, owner: str) -> Dict[str, Any]:
    params = _shelveset_params(name, owner)
    params["requestData.includeDetails"] = "true"
    return as_object(get_json(conn, collection_url(conn, "tfvc", "shelvesets"), params=params))


@returns_result
def get_shelveset_changes(conn: TfsConnection, name: str, owner: str) -> List[Dict[str, Any]]:
    data = get_json(
        conn,
        collection_url(conn, "tfvc", "shelvesets", "changes"),
        params=_shelveset_params(name, owner),
    )
    return changes_summary(values(data))


@returns_result
def get_shelveset_work_items(conn: TfsConnection, name: str, owner: str) -> List[int]:
    """Ids of the work items associated with a shelveset."""
    data = get_json(
        conn,
        collection_url(conn, "tfvc", "shelvesets", "workitems"),
        params=_shelveset_params(name, owner),
    )
    return [item.get("id") for item in values(data)]

"""Helper functions shared by the TFS services and tools."""
from typing import Any, Dict, List, Optional, Union

from ..client import DecodeError
from ..results import Result

ResourceId = Union[int, str]


def require(value: Any, name: str) -> Any:
    """Reject None and empty strings for required identifiers."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{name} is required")
    return value


def field(data: Any, *keys: str) -> Any:
    """Walk nested ``keys`` in a decoded response, raising DecodeError when one is missing."""
    current = data
    path: List[str] = []
    for key in keys:
        path.append(key)
        if not isinstance(current, dict) or key not in current:
            raise DecodeError(f"response has no '{'.'.join(path)}' field")
        current = current[key]
    return current


def as_object(data: Any, what: str = "response") -> Dict[str, Any]:
    """Reject bodies and entries that are not JSON objects."""
    if not isinstance(data, dict):
        raise DecodeError(f"{what} is not a JSON object")
    return data


def values(data: Any) -> List[Dict[str, Any]]:
    """The ``value`` list of a TFS collection response. Every entry must be an object."""
    items = field(data, "value")
    if not isinstance(items, list):
        raise DecodeError("response 'value' field is not a list")
    return [as_object(item, "'value' entry") for item in items]


def id_and_name(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{"id": item.get("id"), "name": item.get("name")} for item in items]


def find_id_by_name(items: List[Dict[str, Any]], name: str) -> Optional[Any]:
    """Id of the first item whose name matches exactly, or None."""
    for item in items:
        if item.get("name") == name:
            return item.get("id")
    return None


def unwrap(result: Result) -> Any:
    """Return a Success value, or raise so the MCP host sees a tool error."""
    if not result.ok:
        raise RuntimeError(f"TFS request failed: {result.error}")
    return result.value

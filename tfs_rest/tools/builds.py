"""Build-related MCP tools."""
from typing import Any, Dict, Optional

from ..config import connection_from_env, mcp
from ..services import builds
from ..services.waiter import wait_for_build as wait_for_build_internal
from ..utils.helpers import unwrap


@mcp.tool()
def get_build_status(build_id: int) -> str:
    """
        Return the current status of a build.

        Parameters:
        - build_id: The numeric build id, as returned by `queue_build`.

        Returns:
        - The TFS status string: "notStarted", "inProgress", "completed",
          "cancelling" or "postponed". Use `get_build` for the result
          (succeeded/failed) of a completed build.
    """
    return unwrap(builds.get_build_status(connection_from_env(), build_id))


@mcp.tool()
def get_build(build_id: int) -> Dict[str, Any]:
    """Return the full build object for a build id."""
    return unwrap(builds.get_build(connection_from_env(), build_id))


@mcp.tool()
def get_build_definition_id(name: str) -> Optional[int]:
    """
        Resolve a build definition name into its numeric id.

        Returns null when no definition in the configured project has exactly
        that name.
    """
    return unwrap(builds.get_build_definition_id(connection_from_env(), name))


@mcp.tool()
def queue_build(
        definition_id: int,
        source_branch: Optional[str] = None,
        parameters: Optional[Dict[str, str]] = None,
) -> int:
    """
        Queue a new build and return its build id.

        Parameters:
        - definition_id: Build definition id. Use `get_build_definition_id` to look one up by name.
        - source_branch: Optional branch or server path to build, e.g. "$/Project/Main".
          The definition's default is used when omitted.
        - parameters: Optional queue-time variables, e.g. {"Configuration": "Release"}.

        Typical usage pattern:
        1. `get_build_definition_id(name="CI")`
        2. `queue_build(definition_id=<id>)`
        3. `wait_for_build(build_id=<returned id>)`
    """
    conn = connection_from_env()
    return unwrap(builds.queue_build(conn, definition_id, source_branch, parameters))


@mcp.tool()
def cancel_build(build_id: int) -> str:
    """Request cancellation of a running build. Returns the new status."""
    return unwrap(builds.cancel_build(connection_from_env(), build_id))


@mcp.tool()
def wait_for_build(build_id: int, timeout_minutes: float = 5, poll_interval_seconds: float = 5) -> str:
    """
        Block until a build is no longer in progress, or until the timeout elapses.

        Returns one of:
        - "succeeded": the build left the "inProgress" status. This says nothing
          about whether the build itself passed; check `get_build` for that.
        - "timedOut": the build was still in progress when the timeout ran out.
        - "failed": the status could not be fetched.

        The wait blocks: the server does not answer any other tool call until
        it returns, which can take up to `timeout_minutes`.
    """
    outcome = wait_for_build_internal(
        connection_from_env(),
        build_id,
        timeout_minutes,
        poll_interval_seconds,
    )
    return outcome.value

"""Configuration management for the TFS REST tools."""
import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

load_dotenv()

# Global MCP instance - accessible everywhere
mcp = FastMCP("tfs-rest")

DEFAULT_API_VERSION = "2.0"
DEFAULT_TIMEOUT = 30.0

REQUIRED_ENV = ("TFS_COLLECTION_URL", "TFS_PROJECT", "TFS_PAT")


@dataclass(frozen=True)
class TfsConnection:
    """Everything needed to address one team project on a TFS collection.

    collection_url is the collection base address, e.g.
    ``https://tfs.example.com/tfs/DefaultCollection``. credential is either a
    bare personal access token or a ``user:password`` pair.
    """

    collection_url: str
    project: str
    credential: str
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        for name in ("collection_url", "project", "credential", "api_version"):
            if not getattr(self, name):
                raise ValueError(f"TfsConnection.{name} must be a non-empty string")
        object.__setattr__(self, "collection_url", self.collection_url.rstrip("/"))

    @property
    def basic_auth(self) -> tuple:
        """(username, password) pair for HTTP Basic auth."""
        user, sep, secret = self.credential.partition(":")
        if not sep:
            return ("", self.credential)
        return (user, secret)

    def __repr__(self) -> str:
        return (
            f"TfsConnection(collection_url={self.collection_url!r}, "
            f"project={self.project!r}, api_version={self.api_version!r})"
        )


@lru_cache(maxsize=1)
def connection_from_env() -> TfsConnection:
    """Build the connection the MCP tools use from environment variables."""
    missing = [name for name in REQUIRED_ENV if not os.getenv(name)]
    if missing:
        raise SystemExit(f"Missing env vars: {' / '.join(missing)}")

    return TfsConnection(
        collection_url=os.environ["TFS_COLLECTION_URL"],
        project=os.environ["TFS_PROJECT"],
        credential=os.environ["TFS_PAT"],
        api_version=os.getenv("TFS_API_VERSION", DEFAULT_API_VERSION),
        timeout=float(os.getenv("TFS_TIMEOUT", DEFAULT_TIMEOUT)),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Send log output to stderr so stdout stays free for the MCP protocol."""
    level_name = (level or os.getenv("TFS_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

"""Main MCP server entry point."""
import logging

from .config import configure_logging, connection_from_env, mcp

logger = logging.getLogger(__name__)


def main():
    """Entry point for the MCP server."""
    configure_logging()
    conn = connection_from_env()
    logger.info("Serving TFS tools for %s/%s", conn.collection_url, conn.project)

    # Import all modules to trigger tool registration
    from . import tools  # noqa: F401

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

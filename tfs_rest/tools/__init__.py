"""Auto-import all tool modules to register them."""
# Import all tool modules - they will auto-register with the global mcp instance
from . import builds  # noqa: F401
from . import source_control  # noqa: F401
from . import work_items  # noqa: F401
from . import teams  # noqa: F401
from . import test_plans  # noqa: F401

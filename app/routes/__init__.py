"""Route handlers."""

from .echo import router as echo_router
from .lint import router as lint_router
from .root import router as root_router
from .status import router as status_router

__all__ = ["root_router", "status_router", "echo_router", "lint_router"]

"""Per-task log fields carried through contextvars."""
import contextvars
from typing import Any, Dict, Optional


_fields_var: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_fields")


def get_context() -> Dict[str, Any]:
    """Return a copy of the fields bound in the current task."""
    return dict(_fields_var.get({}))


class log_context:
    """Bind fields to every log entry written inside the block.

    Nested blocks add to the outer fields and may shadow them. Tasks
    started inside the block (such as source loads fanned out by the
    builder) inherit the fields.

    Example:
        async with log_context(operation="configuration_build"):
            logger.info("Loading sources")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token: Optional[contextvars.Token] = None

    async def __aenter__(self) -> "log_context":
        self._token = _fields_var.set({**_fields_var.get({}), **self.fields})
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _fields_var.reset(self._token)
        self._token = None

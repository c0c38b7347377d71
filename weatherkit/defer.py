"""Run a callable when a scope is left."""

from __future__ import annotations

from typing import Any, Callable, Optional


class ScopeGuard:
    """Context manager that calls a function once on leaving the block."""

    def __init__(self, func: Optional[Callable[[], Any]]) -> None:
        self._func = func

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Run the deferred function now, if it has not run yet."""
        func, self._func = self._func, None
        if func:
            func()
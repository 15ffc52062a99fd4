"""Run a callable when a block is left, unless cancelled."""

from __future__ import annotations

from types import TracebackType
from typing import Callable


class ScopeExit:
    """Context manager that calls a function on exit unless cancel() was called."""

    def __init__(self, callable: Callable[[], object]) -> None:
        self._callable = callable
        self._cancelled = False

    def cancel(self) -> None:
        """Prevent the callable from running on exit."""
        self._cancelled = True

    def __enter__(self) -> ScopeExit:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if not self._cancelled:
            self._cancelled = True
            self._callable()
        return False


def make_scope_exit(callable: Callable[[], object]) -> ScopeExit:
    """Create a ScopeExit for the given callable."""
    return ScopeExit(callable)
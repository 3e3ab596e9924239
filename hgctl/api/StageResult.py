"""Outcome of one service command, produced in four stages."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands back before any work has happened.

    ``announce`` is shown first. Iterating ``progress_callback(result)``
    performs the work, yielding ``(fraction, message)`` pairs, and fills in
    ``result``, ``output`` and ``success`` when it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def drain(self) -> list[tuple[float, str]]:
        """Run the work to completion and return every progress step."""
        return list(self.progress_callback(self))

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

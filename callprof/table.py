"""Per-function aggregated statistics kept in the global table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class FuncStats:
    """Call count, accumulated ticks and pending enter timestamps of one function."""

    MAX_DEPTH: ClassVar[int] = 256

    call_count: int = 0
    total_ticks: int = 0
    enter_stack: list[int] = field(default_factory=list, repr=False)

    @property
    def depth(self) -> int:
        """Number of enter timestamps still waiting for a matching exit."""
        return len(self.enter_stack)

    def enter(self, timestamp: int) -> None:
        """Record a call; its timestamp is kept only below the maximum depth."""
        self.call_count += 1
        if len(self.enter_stack) < self.MAX_DEPTH:
            self.enter_stack.append(timestamp)

    def exit(self, timestamp: int) -> None:
        """Close the innermost pending call and add its duration."""
        if self.enter_stack:
            self.total_ticks += timestamp - self.enter_stack.pop()
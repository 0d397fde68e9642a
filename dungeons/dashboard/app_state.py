"""Application state owned by the dashboard loop.

The loop is the only writer. Input dispatch flips the exit flag; the path
statistics are supplied from outside by a pathfinding collaborator.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..core.data import LoopState
from .grid import Grid


@dataclass(frozen=True)
class PathStats:
    """Results a pathfinding collaborator reports for the current map.

    ``None`` means the value has not been computed.
    """
    minimal_steps: Optional[int] = None
    total_paths: Optional[int] = None


@dataclass
class AppState:
    grid: Grid
    exit: bool = False
    path_stats: PathStats = field(default_factory=PathStats)

    @property
    def status(self) -> LoopState:
        return LoopState.EXITED if self.exit else LoopState.RUNNING

    def request_exit(self) -> None:
        self.exit = True

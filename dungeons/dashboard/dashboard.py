"""
Dashboard orchestration and the tick-driven render/input loop.

Each iteration paints a full frame, then waits for input for whatever is left
of the current tick. The wait is the only place the loop blocks, and it never
lasts longer than one tick interval.
"""

import time
from typing import Callable, Optional

from ..core.config_loader import DashboardConfig
from ..core.frame import Frame
from ..core.layout import RegionTree, partition
from ..core.log_manager import LogManager
from ..core.renderer import Renderer
from .app_state import AppState, PathStats
from .grid import Grid
from .input_handler import InputHandler
from .panels import PanelData, PanelRenderer


class Dashboard:
    """Owns the application state and drives the render/input loop."""

    def __init__(
        self,
        grid: Grid,
        renderer: Renderer,
        config: Optional[DashboardConfig] = None,
        log_manager: Optional[LogManager] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.renderer = renderer
        self.config = config or DashboardConfig()
        self.log_manager = log_manager or LogManager()
        self.state = AppState(grid=grid)
        self.clock = clock

        self.panel_renderer = PanelRenderer()
        self.input_handler = InputHandler(
            app_state=self.state,
            key_mappings=self.config.key_mappings,
            log_manager=self.log_manager,
        )
        self.frame_count = 0

    @property
    def tick_rate(self) -> float:
        return self.config.tick_rate

    def set_path_stats(self, stats: PathStats) -> None:
        """Inject results from a pathfinding collaborator for the Description panel."""
        self.state.path_stats = stats

    def run(self) -> None:
        """Run until quit. The renderer is released on every exit path."""
        with self.renderer:
            self.log_manager.system("Dashboard started")
            last_tick = self.clock()

            while not self.state.exit:
                self.render()

                timeout = max(0.0, self.tick_rate - (self.clock() - last_tick))
                event = self.renderer.poll_input(timeout)
                if event is not None:
                    self.input_handler.handle_event(event)

                if self.clock() - last_tick >= self.tick_rate:
                    last_tick = self.clock()

        self.log_manager.system(f"Dashboard stopped after {self.frame_count} frames")

    def build_panel_data(self) -> PanelData:
        return PanelData(
            grid=self.state.grid,
            minimal_steps=self.state.path_stats.minimal_steps,
            total_paths=self.state.path_stats.total_paths,
            title_text=self.config.title_text,
            options_text=self.config.options_text,
            help_text=self.config.help_text,
        )

    def draw(self, frame: Frame) -> RegionTree:
        """Paint every panel into ``frame`` and return the regions used."""
        regions = partition(frame.area)
        data = self.build_panel_data()
        for kind, region in regions.panels():
            self.panel_renderer.render_panel(kind, region, data, frame)
        return regions

    def render(self) -> None:
        """Render the current frame."""
        width, height = self.renderer.get_screen_size()
        frame = Frame(width, height)
        self.draw(frame)
        self.renderer.clear()
        self.renderer.render_frame(frame)
        self.renderer.present()
        self.frame_count += 1

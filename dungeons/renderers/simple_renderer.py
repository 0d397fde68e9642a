"""Headless renderer for demos and tests."""

from collections import deque
from typing import Callable, Iterable, Optional

from ..core.frame import Frame
from ..core.input import InputEvent, Key
from ..core.renderer import Renderer, RendererConfig


class SimpleRenderer(Renderer):
    """Headless renderer for demos and tests.

    Frames are kept as plain text instead of being drawn to a terminal, and
    input comes from a scripted queue. In demo mode a quit key is injected
    once ``auto_quit_at`` frames have been rendered.
    """

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        events: Optional[Iterable[Optional[InputEvent]]] = None,
        demo_mode: bool = False,
        auto_quit_at: int = 10,
        echo: bool = False,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        super().__init__(config)
        self._frame_count = 0
        self._auto_quit_at = auto_quit_at
        self._demo_mode = demo_mode
        self._echo = echo
        self._sleep = sleep
        self._events: deque[Optional[InputEvent]] = deque(events or [])
        self._current: Optional[Frame] = None

        self.frames: list[list[str]] = []
        self.poll_timeouts: list[float] = []
        self.initialized = False
        self.cleaned_up = False

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def last_frame(self) -> Optional[Frame]:
        return self._current

    def queue_event(self, event: Optional[InputEvent]) -> None:
        """Queue an event for a later poll; ``None`` simulates a poll that times out."""
        self._events.append(event)

    def initialize(self) -> None:
        self.initialized = True
        if self._echo:
            print(f"Initializing SimpleRenderer ({self.config.width}x{self.config.height})")
            print("=" * self.config.width)

    def cleanup(self) -> None:
        self.cleaned_up = True
        if self._echo:
            print("\nSimpleRenderer cleanup complete")

    def clear(self) -> None:
        pass

    def render_frame(self, frame: Frame) -> None:
        self._frame_count += 1
        self._current = frame
        self.frames.append(frame.plain_lines())

    def present(self) -> None:
        if self._echo and self._current is not None:
            print(f"\n--- Frame {self._frame_count} ---")
            for line in self._current.plain_lines():
                print(line)

    def poll_input(self, timeout: float) -> Optional[InputEvent]:
        self.poll_timeouts.append(timeout)

        if self._events:
            event = self._events.popleft()
            if event is not None:
                return event
        elif self._demo_mode and self._frame_count >= self._auto_quit_at:
            return InputEvent.key_press(Key.Q)

        # Nothing arrived: the whole budget elapses
        if self._sleep is not None:
            self._sleep(timeout)
        return None

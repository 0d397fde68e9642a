from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass

from .frame import Frame
from .input import InputEvent


@dataclass
class RendererConfig:
    width: int = 80
    height: int = 24
    title: str = "DUNGEONS"


class TerminalError(RuntimeError):
    """The display surface could not be acquired or restored."""


class Renderer(ABC):
    """Display surface owned by the event loop.

    Acquire it with ``with renderer:``; the session is released on every exit
    path, including exceptions raised inside the block.
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or RendererConfig()
        self._running = False

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass

    @abstractmethod
    def render_frame(self, frame: Frame) -> None:
        pass

    @abstractmethod
    def poll_input(self, timeout: float) -> Optional[InputEvent]:
        """Wait up to ``timeout`` seconds for one input event."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def present(self) -> None:
        pass

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        try:
            self.initialize()
        except BaseException:
            # Undo whatever part of the setup already happened
            self.cleanup()
            raise
        self._running = True

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self.cleanup()

    def __enter__(self) -> "Renderer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def get_screen_size(self) -> tuple[int, int]:
        return (self.config.width, self.config.height)

"""Raw-mode ANSI terminal renderer.

Puts the terminal into raw mode on the alternate screen, repaints the whole
frame each iteration and decodes key presses, including arrow escape
sequences, from standard input.
"""

import os
import select
import shutil
import sys
import termios
import tty
from collections import deque
from typing import Optional

from ..core.frame import Frame
from ..core.input import InputEvent, Key
from ..core.renderer import Renderer, RendererConfig, TerminalError


# Escape sequences sent by arrow keys (CSI and SS3 forms)
ARROW_SEQUENCES = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
}

SIMPLE_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    " ": Key.SPACE,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "?": Key.HELP,
}


def parse_input(text: str) -> list[InputEvent]:
    """Decode raw terminal input into key events.

    A single read may carry several keys; they are returned in order.
    """
    events = []
    index = 0
    while index < len(text):
        char = text[index]

        if char == "\x1b":
            sequence = text[index + 1:index + 3]
            if sequence in ARROW_SEQUENCES:
                events.append(InputEvent.key_press(ARROW_SEQUENCES[sequence], raw_data=char + sequence))
                index += 3
                continue
            events.append(InputEvent.key_press(Key.ESCAPE, raw_data=char))
        elif char in SIMPLE_KEYS:
            events.append(InputEvent.key_press(SIMPLE_KEYS[char], raw_data=char))
        elif "\x01" <= char <= "\x1a":
            # Ctrl+letter arrives as a control code in raw mode
            letter = chr(ord(char) + ord("A") - 1)
            events.append(InputEvent.key_press(Key[letter], ctrl=True, raw_data=char))
        elif char.isascii() and char.isalpha():
            events.append(InputEvent.key_press(Key[char.upper()], shift=char.isupper(), raw_data=char))
        elif char.isascii() and char.isdigit():
            events.append(InputEvent.key_press(Key[f"NUM_{char}"], raw_data=char))
        else:
            events.append(InputEvent.key_press(Key.UNKNOWN, raw_data=char))

        index += 1

    return events


class TerminalRenderer(Renderer):
    """Full-screen renderer on a raw-mode ANSI terminal."""

    def __init__(self, config: Optional[RendererConfig] = None):
        super().__init__(config)
        self._old_settings = None
        self._buffer: list[str] = []
        self._pending: deque[InputEvent] = deque()

        # Terminal control codes
        self.terminal_codes = {
            "reset": "\033[0m",
            "clear_screen": "\033[2J",
            "cursor_home": "\033[H",
            "hide_cursor": "\033[?25l",
            "show_cursor": "\033[?25h",
            "enter_alt_screen": "\033[?1049h",
            "leave_alt_screen": "\033[?1049l",
        }

    def _stdin_fd(self) -> int:
        try:
            return sys.stdin.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalError(f"Cannot acquire terminal: standard input is unavailable ({e})") from e

    def _write(self, text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    def initialize(self) -> None:
        fd = self._stdin_fd()
        if not os.isatty(fd):
            raise TerminalError("Cannot acquire terminal: standard input is not a TTY")
        try:
            self._old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise TerminalError(f"Cannot switch terminal to raw mode: {e}") from e

        self._write(
            self.terminal_codes["enter_alt_screen"]
            + self.terminal_codes["hide_cursor"]
            + self.terminal_codes["clear_screen"]
            + self.terminal_codes["cursor_home"]
        )

    def cleanup(self) -> None:
        if self._old_settings is None:
            return
        settings, self._old_settings = self._old_settings, None
        # Leave raw mode before touching stdout so a failed write cannot strand it
        try:
            termios.tcsetattr(self._stdin_fd(), termios.TCSADRAIN, settings)
        except termios.error as e:
            raise TerminalError(f"Cannot restore terminal settings: {e}") from e
        finally:
            self._write(
                self.terminal_codes["reset"]
                + self.terminal_codes["show_cursor"]
                + self.terminal_codes["leave_alt_screen"]
            )

    def get_screen_size(self) -> tuple[int, int]:
        size = shutil.get_terminal_size((self.config.width, self.config.height))
        return (size.columns, size.lines)

    def clear(self) -> None:
        self._buffer.clear()

    def render_frame(self, frame: Frame) -> None:
        self._buffer = frame.styled_lines()

    def present(self) -> None:
        # Full repaint; raw mode needs explicit carriage returns
        self._write(
            self.terminal_codes["cursor_home"]
            + self.terminal_codes["clear_screen"]
            + "\r\n".join(self._buffer)
            + self.terminal_codes["reset"]
        )
        self._buffer.clear()

    def poll_input(self, timeout: float) -> Optional[InputEvent]:
        if self._pending:
            return self._pending.popleft()

        fd = self._stdin_fd()
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout))
        if not ready:
            return None

        data = os.read(fd, 64)
        if not data:
            raise EOFError("Terminal input stream closed")

        self._pending.extend(parse_input(data.decode("utf-8", errors="replace")))
        return self._pending.popleft() if self._pending else None

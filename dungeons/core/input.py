"""Keyboard input model.

Renderers decode raw input into InputEvent objects; the dashboard only ever
sees keys, never terminal bytes.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Any


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    SPACE = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()

    NUM_0 = auto()
    NUM_1 = auto()
    NUM_2 = auto()
    NUM_3 = auto()
    NUM_4 = auto()
    NUM_5 = auto()
    NUM_6 = auto()
    NUM_7 = auto()
    NUM_8 = auto()
    NUM_9 = auto()

    HELP = auto()  # For ? key

    UNKNOWN = auto()


@dataclass
class InputEvent:
    """A single key press with its modifiers and the bytes it came from."""
    key: Key
    shift: bool = False
    ctrl: bool = False
    raw_data: Optional[Any] = None

    @classmethod
    def key_press(cls, key: Key, shift: bool = False, ctrl: bool = False,
                  raw_data: Optional[Any] = None) -> "InputEvent":
        return cls(
            key=key,
            shift=shift,
            ctrl=ctrl,
            raw_data=raw_data
        )


def parse_key_name(name: str) -> Optional[Key]:
    """Translate a configured key name ("q", "up", "enter", "5") to a Key."""
    if str(name) == ' ':
        return Key.SPACE
    key_str = str(name).upper().strip()

    special_keys = {
        '?': Key.HELP,
        'ESC': Key.ESCAPE,
        'RETURN': Key.ENTER,
    }
    if key_str in special_keys:
        return special_keys[key_str]

    if key_str.isdigit() and len(key_str) == 1:
        return Key[f"NUM_{key_str}"]

    try:
        return Key[key_str]
    except KeyError:
        return None

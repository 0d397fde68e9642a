"""Dashboard configuration loader.

Loads tick rate, static panel text and key mappings from a YAML file so that
display text and bindings are defined outside the code. A missing or
unreadable file falls back to the built-in defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .input import Key, parse_key_name
from .log_manager import LogManager


DEFAULT_TICK_RATE_MS = 250

DEFAULT_TITLE_TEXT = "Welcome to DUNGEONS. Press q to quit"

DEFAULT_OPTIONS_TEXT = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)

DEFAULT_HELP_TEXT = (
    "(q) quit | (↑) previous option | (↓) next option | (Enter) select option"
    " | (←) previous path | (→) next path"
)

DEFAULT_KEY_MAPPINGS = {
    "q": "quit",
    "up": "previous_option",
    "down": "next_option",
    "enter": "select_option",
    "left": "previous_path",
    "right": "next_path",
}


def _default_key_mappings() -> dict[Key, str]:
    return {parse_key_name(name): action for name, action in DEFAULT_KEY_MAPPINGS.items()}


@dataclass
class DashboardConfig:
    """Resolved dashboard settings."""
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS
    title_text: str = DEFAULT_TITLE_TEXT
    options_text: str = DEFAULT_OPTIONS_TEXT
    help_text: str = DEFAULT_HELP_TEXT
    key_mappings: dict[Key, str] = field(default_factory=_default_key_mappings)

    def __post_init__(self):
        if isinstance(self.tick_rate_ms, bool) or not isinstance(self.tick_rate_ms, int):
            raise ValueError(f"tick_rate_ms must be an integer, got {self.tick_rate_ms!r}")
        if self.tick_rate_ms <= 0:
            raise ValueError(f"tick_rate_ms must be positive, got {self.tick_rate_ms}")

    @property
    def tick_rate(self) -> float:
        """Tick interval in seconds."""
        return self.tick_rate_ms / 1000.0


class ConfigLoader:
    """Loader for the dashboard configuration file with caching and fallbacks."""

    def __init__(self, config_path: Optional[str] = None, log_manager: Optional[LogManager] = None):
        self.config_path = config_path or self._find_default_config_path()
        self.log_manager = log_manager
        self._cached_config: Optional[DashboardConfig] = None

    def _find_default_config_path(self) -> str:
        """Find assets/config/dashboard.yaml relative to the package."""
        current_dir = Path(__file__).parent
        for _ in range(4):  # Limit search depth
            config_path = current_dir / "assets" / "config" / "dashboard.yaml"
            if config_path.exists():
                return str(config_path)
            current_dir = current_dir.parent

        return "assets/config/dashboard.yaml"

    def _warn(self, text: str) -> None:
        if self.log_manager is not None:
            self.log_manager.warning(text)

    def load_config(self, force_reload: bool = False) -> DashboardConfig:
        """Load the configuration, using the cache if available.

        Raises:
            ValueError: The file parsed but holds an invalid tick rate.
        """
        if self._cached_config is not None and not force_reload:
            return self._cached_config

        if not os.path.exists(self.config_path):
            self._warn(f"Config file not found at {self.config_path}, using defaults")
            self._cached_config = DashboardConfig()
            return self._cached_config

        try:
            with open(self.config_path, "r", encoding="utf-8") as file:
                config_data = yaml.safe_load(file) or {}
        except (OSError, yaml.YAMLError) as e:
            self._warn(f"Error loading config {self.config_path}: {e}; using defaults")
            self._cached_config = DashboardConfig()
            return self._cached_config

        if not isinstance(config_data, dict):
            self._warn(f"Config {self.config_path} is not a mapping; using defaults")
            config_data = {}

        self._cached_config = self._build_config(config_data)
        if self.log_manager is not None:
            self.log_manager.config(f"Loaded config from {self.config_path}")
        return self._cached_config

    def _build_config(self, config_data: dict[str, Any]) -> DashboardConfig:
        text = config_data.get("text") or {}
        if not isinstance(text, dict):
            self._warn("Config section 'text' is not a mapping; using default text")
            text = {}
        mappings = config_data.get("key_mappings")
        if mappings is not None and not isinstance(mappings, dict):
            self._warn("Config section 'key_mappings' is not a mapping; using default keys")
            mappings = None

        return DashboardConfig(
            tick_rate_ms=config_data.get("tick_rate_ms", DEFAULT_TICK_RATE_MS),
            title_text=str(text.get("title", DEFAULT_TITLE_TEXT)),
            options_text=" ".join(str(text.get("options", DEFAULT_OPTIONS_TEXT)).split()),
            help_text=str(text.get("help", DEFAULT_HELP_TEXT)),
            key_mappings=self._parse_key_mappings(mappings) if mappings else _default_key_mappings(),
        )

    def _parse_key_mappings(self, mappings: dict[Any, Any]) -> dict[Key, str]:
        """Convert configured key names to Key enums, skipping unknown keys."""
        key_mapping = {}
        for key_name, action in mappings.items():
            key = parse_key_name(key_name)
            if key is None:
                self._warn(f"Unknown key '{key_name}' in key_mappings")
                continue
            key_mapping[key] = str(action).lower()
        return key_mapping


# Global loader instance for easy access
_default_loader: Optional[ConfigLoader] = None


def get_dashboard_config(config_path: Optional[str] = None,
                         log_manager: Optional[LogManager] = None) -> DashboardConfig:
    """Load a dashboard configuration, caching the default file."""
    global _default_loader
    if config_path is not None:
        return ConfigLoader(config_path, log_manager).load_config()
    if _default_loader is None:
        _default_loader = ConfigLoader(log_manager=log_manager)
    return _default_loader.load_config()

#!/usr/bin/env python3

import sys
import os
import time
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from dungeons.core.config_loader import DashboardConfig
from dungeons.core.input import InputEvent, Key
from dungeons.core.renderer import RendererConfig
from dungeons.dashboard import Dashboard, Grid, PathStats
from dungeons.renderers.simple_renderer import SimpleRenderer


def main():
    print("DUNGEONS - Demo Mode")
    print("This demo renders the sample map with the headless renderer")
    print("")

    config = RendererConfig(
        width=80,
        height=34,
        title="DUNGEONS Demo"
    )

    # A navigation key (reserved, no effect) followed by quit
    renderer = SimpleRenderer(
        config,
        events=[None, InputEvent.key_press(Key.DOWN), None, InputEvent.key_press(Key.Q)],
        echo=True,
        sleep=time.sleep,
    )

    dashboard = Dashboard(Grid.sample(), renderer, config=DashboardConfig(tick_rate_ms=500))
    # Illustrative values standing in for a pathfinding collaborator
    dashboard.set_path_stats(PathStats(minimal_steps=14, total_paths=3))

    try:
        dashboard.run()
    except Exception as e:
        print(f"\nError: {e}")
        raise

    print(f"\nDemo complete after {renderer.frame_count} frames")
    print("\nLog:")
    for line in dashboard.log_manager.get_formatted_messages():
        print(f"  {line}")
    print("\nTo run interactively:")
    print("  - Run 'python main.py'")


if __name__ == "__main__":
    main()

import argparse
import sys
from dataclasses import replace
from typing import Optional

from .core.config_loader import get_dashboard_config
from .core.log_manager import LogManager
from .core.renderer import Renderer, RendererConfig
from .dashboard import Dashboard, Grid
from .renderers import SimpleRenderer, TerminalRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DUNGEONS terminal dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                     # Run the dashboard in this terminal
  python main.py --tick-ms 100       # Redraw every 100 ms
  python main.py --headless          # Render a few frames without a terminal
  python main.py --headless --debug  # Also print the session log on exit
        """
    )
    parser.add_argument(
        "--config",
        help="Path to a dashboard YAML config (default: bundled assets/config/dashboard.yaml)"
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        help="Override the tick interval in milliseconds"
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Use the headless renderer and quit automatically"
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=3,
        help="Frames to render before quitting in headless mode (default: 3)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the session log, including debug messages, to stderr on exit"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log_manager = LogManager()
    if args.debug:
        log_manager.enable_debug()

    status = 0
    try:
        config = get_dashboard_config(args.config, log_manager)
        if args.tick_ms is not None:
            config = replace(config, tick_rate_ms=args.tick_ms)

        renderer_config = RendererConfig(title="DUNGEONS")
        renderer: Renderer
        if args.headless:
            renderer = SimpleRenderer(renderer_config, demo_mode=True, auto_quit_at=args.frames, echo=True)
        else:
            renderer = TerminalRenderer(renderer_config)

        dashboard = Dashboard(Grid.sample(), renderer, config=config, log_manager=log_manager)
        dashboard.run()
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        status = 130
    except Exception as e:
        # The renderer has already restored the terminal by the time we get here
        log_manager.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        status = 1

    if args.debug:
        for line in log_manager.get_formatted_messages():
            print(line, file=sys.stderr)

    return status


if __name__ == "__main__":
    sys.exit(main())

"""Entry point for running the forecast view as a module."""

import argparse
import asyncio
import atexit
import json
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .app import ForecastApp
from .components.console_surface import ConsoleSurface
from .errors import ConfigurationError
from .models.config import Config
from .models.style import Style
from .services.fetch_controller import FetchController
from .services.location import resolve_coordinates
from .services.store import AppState

# Global reference for signal handlers
_app: ForecastApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    # Try to add rotating file handler
    log_dir = Path("logs")
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "forecastview.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully.

    Args:
        signum: Signal number received
        frame: Current stack frame (unused)
    """
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("Forecast View shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)
    atexit.register(_cleanup)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forecastview",
        description="Forecast View - NWS weather forecast in the terminal",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument("--latitude", type=float, help="Override configured latitude")
    parser.add_argument("--longitude", type=float, help="Override configured longitude")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Fetch once and print the forecast instead of opening the view",
    )
    parser.add_argument(
        "--style",
        choices=[s.value for s in Style],
        help="Display style (default: from config)",
    )
    parser.add_argument(
        "--no-hourly",
        action="store_true",
        help="Request the period forecast instead of the hourly one",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a copy of the config with command-line overrides applied."""
    data = config.model_dump()
    if args.latitude is not None:
        data["location"]["latitude"] = args.latitude
    if args.longitude is not None:
        data["location"]["longitude"] = args.longitude
    if args.style:
        data["settings"]["default_style"] = args.style
    if args.no_hourly:
        data["service"]["hourly"] = False
    return Config.model_validate(data)


async def print_forecast(config: Config) -> int:
    """Fetch once and print to stdout; return a process exit code."""
    surface = ConsoleSurface()
    controller = FetchController(AppState(config), surface=surface)
    try:
        latitude, longitude = resolve_coordinates(config.location)
    except ConfigurationError as e:
        controller.report(str(e))
        return 2
    return 0 if await controller.fetch(latitude, longitude) else 1


def main() -> None:
    """Main entry point."""
    global _app

    args = build_parser().parse_args()

    # Handle version flag
    if args.version:
        from . import __version__

        print(f"Forecast View v{__version__}")
        sys.exit(0)

    try:
        config = apply_overrides(Config.load_or_default(args.config), args)
    except (ValidationError, json.JSONDecodeError) as e:
        print(f"Invalid configuration in {args.config}: {e}", file=sys.stderr)
        sys.exit(2)

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)

    if args.print_only:
        sys.exit(asyncio.run(print_forecast(config)))

    setup_signal_handlers()
    _logger.info("Starting Forecast View")

    _app = ForecastApp(config=config)
    _app.run()


if __name__ == "__main__":
    main()

"""Command-line entry point: ``python -m pulsarhawk``."""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pulsarhawk import __version__
from pulsarhawk.app import PulsarHawkApp
from pulsarhawk.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_MAX_BYTES = 5 * 1024 * 1024
_LOG_BACKUPS = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pulsarhawk",
        description="Terminal dashboard for Apache Pulsar clusters.",
    )
    parser.add_argument("-c", "--config", help="path to the YAML config file")
    parser.add_argument("--log-level", help="override the configured log level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def configure_logging(settings: AppSettings, level: str | None = None) -> None:
    """Log to a rotating file; the terminal belongs to the TUI."""
    log_file = Path(settings.log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file, maxBytes=_LOG_MAX_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel((level or settings.log_level).upper())


def load_settings(config: str | None) -> AppSettings:
    try:
        return ConfigManager.load(config)
    except ConfigLoadError:
        if config:
            raise
        # Use defaults if the default location has no usable config
        return AppSettings()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except ConfigLoadError as exc:
        print(f"pulsarhawk: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings, args.log_level)
    logger.info("Starting pulsarhawk %s against %s", __version__, settings.admin_url)
    PulsarHawkApp(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

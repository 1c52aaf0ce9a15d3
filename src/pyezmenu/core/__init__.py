# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyezmenu (logging, telemetry, config, timers).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/02/2026	Initial coding / release
# 10/04/2026	Export MenubarConfig + schedulers
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import MenubarConfig
from .logging import init_logging, get_logger, get_app_logger
from .scheduler import ClockScheduler, Scheduler
from .telemetry import init_telemetry, get_telemetry, Telemetry

__all__ = [
	"MenubarConfig",
	"get_logger",
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
	"Telemetry",
	"ClockScheduler",
	"Scheduler",
]

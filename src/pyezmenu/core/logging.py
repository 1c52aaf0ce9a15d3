# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Logging helpers for pyezmenu (stdlib logging).
#
# Notes:
#	- No Tk dependency; the menu engine logs before (or without) any view.
#	- init_logging() is idempotent and only reconfigures when the resolved
#	  settings change, so hosts may call it on every widget construction.
#	- Each setting accepts a dotted key and a flat alias (first match wins):
#		level		"logging.level" | "log_level"			(default "INFO")
#		console		"logging.console" | "log_console"		(default True)
#		file		"logging.file" | "log_file"				(default None)
#		file_mode	"logging.file_mode" | "log_file_mode"	(default "a")
#		reset_root	"logging.reset_root" | "log_reset_root"	(default False)
#		format		"logging.format" | "log_format"
#		datefmt		"logging.datefmt" | "log_datefmt"
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/02/2026	Initial coding / release
# 10/06/2026	Scope handlers to the pyezmenu logger instead of root by default
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


LOGGER_NAMESPACE = "pyezmenu"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# setting -> (dotted key, flat alias, default)
_SETTINGS: dict[str, tuple[str, str, Any]] = {
	"level": ("logging.level", "log_level", "INFO"),
	"console": ("logging.console", "log_console", True),
	"file": ("logging.file", "log_file", None),
	"file_mode": ("logging.file_mode", "log_file_mode", "a"),
	"reset_root": ("logging.reset_root", "log_reset_root", False),
	"format": ("logging.format", "log_format", DEFAULT_FORMAT),
	"datefmt": ("logging.datefmt", "log_datefmt", DEFAULT_DATEFMT),
}

_handlers: list[logging.Handler] = []
_signature: tuple[Any, ...] | None = None


def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a logger under the pyezmenu namespace.

	Examples:
		get_app_logger()				-> pyezmenu
		get_app_logger("controller")	-> pyezmenu.controller
	"""
	if component:
		return logging.getLogger(f"{LOGGER_NAMESPACE}.{component}")
	return logging.getLogger(LOGGER_NAMESPACE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure pyezmenu logging from a config object.

	Args:
		cfg:
			MenubarConfig, a dict, or anything exposing get(key, default).
	"""
	global _signature

	settings = {name: _lookup(cfg, *spec) for name, spec in _SETTINGS.items()}

	signature: tuple[Any, ...] = (
		_coerce_level(settings["level"]),
		bool(settings["console"]),
		str(settings["file"]) if settings["file"] else None,
		_coerce_file_mode(settings["file_mode"]),
		bool(settings["reset_root"]),
		str(settings["format"]),
		str(settings["datefmt"]),
	)

	if _signature == signature:
		return

	level, console, log_file, file_mode, reset_root, fmt, datefmt = signature

	target = logging.getLogger() if reset_root else get_app_logger()
	target.setLevel(level)

	# Drop whatever a previous init installed (or everything on root reset).
	stale = list(target.handlers) if reset_root else list(_handlers)
	for handler in stale:
		target.removeHandler(handler)
		handler.close()
	_handlers.clear()

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		_install(target, logging.StreamHandler(), level, formatter)

	if log_file:
		_ensure_parent_dir(log_file)
		_install(
			target,
			logging.FileHandler(log_file, mode=file_mode, encoding="utf-8"),
			level,
			formatter,
		)

	_signature = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _install(
	target: logging.Logger,
	handler: logging.Handler,
	level: int,
	formatter: logging.Formatter,
) -> None:
	handler.setLevel(level)
	handler.setFormatter(formatter)
	target.addHandler(handler)
	_handlers.append(handler)


def _lookup(cfg: Any | None, dotted: str, flat: str, default: Any) -> Any:
	"""
	Resolve a setting by its dotted key, then its flat alias.
	"""
	for key in (dotted, flat):
		value = _cfg_get(cfg, key)
		if value is not None:
			return value
	return default


def _cfg_get(cfg: Any | None, key: str) -> Any:
	if cfg is None:
		return None

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, None)

	return None


def _coerce_level(level: Any) -> int:
	if isinstance(level, bool):
		return logging.INFO

	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only append/truncate; anything else falls back to append.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Remove installed handlers and forget the last signature (unit tests only).
	"""
	global _signature

	for handler in list(_handlers):
		for owner in (logging.getLogger(), get_app_logger()):
			if handler in owner.handlers:
				owner.removeHandler(handler)
		handler.close()
	_handlers.clear()
	_signature = None

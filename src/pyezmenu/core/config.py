# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	MenubarConfig: per-widget options for pyezmenu.
#
# Notes:
#	- Frozen; build once per widget with from_options().
#	- get(key, default) lets the logging/telemetry initializers read the
#	  same object as a plain option bag.
#	- Exactly one of label / labelledby names the menubar.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/03/2026	Initial coding / release
# 10/07/2026	Mint id_prefix from uuid4 when not supplied
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from uuid import uuid4


DEFAULT_TYPEAHEAD_TIMEOUT_MS = 500


def mint_id_prefix() -> str:
	return f"pyezmenu-{uuid4().hex[:8]}"


@dataclass(frozen=True, slots=True)
class MenubarConfig:
	"""
	MenubarConfig

	label:					Accessible name (aria-label) of the menubar
	labelledby:				Id of an element naming the menubar (aria-labelledby)
	typeahead_timeout_ms:	Delay before the type-ahead buffer resets
	id_prefix:				Namespace for generated element ids
	options:				Remaining free-form options (logging, telemetry, ...)
	"""
	label: Optional[str] = None
	labelledby: Optional[str] = None
	typeahead_timeout_ms: int = DEFAULT_TYPEAHEAD_TIMEOUT_MS
	id_prefix: str = field(default_factory=mint_id_prefix)
	options: Mapping[str, Any] = field(default_factory=dict)

	def __post_init__(self) -> None:
		if bool(self.label) == bool(self.labelledby):
			raise ValueError("Menubar needs exactly one of 'label' or 'labelledby'")

		if isinstance(self.typeahead_timeout_ms, bool) or not isinstance(self.typeahead_timeout_ms, int):
			raise ValueError(f"typeahead_timeout_ms must be an int, got {self.typeahead_timeout_ms!r}")
		if self.typeahead_timeout_ms <= 0:
			raise ValueError(f"typeahead_timeout_ms must be positive, got {self.typeahead_timeout_ms}")

		if not self.id_prefix:
			raise ValueError("id_prefix must be a non-empty string")

	@classmethod
	def from_options(cls, options: Mapping[str, Any] | None = None) -> "MenubarConfig":
		"""
		Build a config from a flat dict; unknown keys are kept in options.
		"""
		opts = dict(options or {})

		kwargs: dict[str, Any] = {}
		for key in ("label", "labelledby", "typeahead_timeout_ms", "id_prefix"):
			if key in opts:
				value = opts.pop(key)
				if value is not None:
					kwargs[key] = value

		return cls(options=opts, **kwargs)

	def get(self, key: str, default: Any = None) -> Any:
		if key in ("label", "labelledby", "typeahead_timeout_ms", "id_prefix"):
			return getattr(self, key)
		return self.options.get(key, default)

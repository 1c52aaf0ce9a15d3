# ---------------------------------------------------------------------------
# File: typeahead.py
# ---------------------------------------------------------------------------
# Description:
#	Type-ahead matcher for open menus.
#
# Notes:
#	- Typed characters accumulate (lowercased) until the reset timer fires.
#	- Repeating one character cycles through items starting with it.
#	- A single character searches after the focused item; a longer buffer
#	  matches as a prefix starting at the focused item itself.
#	- Disabled items never match, unlike arrow navigation.
#	- At most one reset timer is outstanding; it is cancelled before re-arming.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/05/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional, Sequence

from pyezmenu.core.config import DEFAULT_TYPEAHEAD_TIMEOUT_MS
from pyezmenu.core.scheduler import Scheduler
from pyezmenu.menu.model import MenuItem
from pyezmenu.menu.navigation import enabled_sequence


def is_typeahead_char(key: str, *, ctrl: bool = False, alt: bool = False, meta: bool = False) -> bool:
	"""
	Single printable character with no modifier other than Shift.
	"""
	return len(key) == 1 and key.isprintable() and not (ctrl or alt or meta)


class TypeAhead:
	"""
	TypeAhead

	Holds the search buffer and its reset timer.
	"""

	def __init__(self, scheduler: Scheduler, timeout_ms: int = DEFAULT_TYPEAHEAD_TIMEOUT_MS) -> None:
		self._scheduler = scheduler
		self._timeout_ms = timeout_ms
		self._buffer = ""
		self._handle: Any = None

	@property
	def buffer(self) -> str:
		return self._buffer

	@property
	def armed(self) -> bool:
		return self._handle is not None

	def search(self, char: str, items: Sequence[MenuItem], current_id: Optional[str]) -> Optional[str]:
		"""
		Feed one character; return the id to focus, or None when nothing matches.
		"""
		enabled = enabled_sequence(items)
		if not enabled:
			return None

		self._cancel_timer()

		self._buffer += char.lower()
		buf = self._buffer

		ids = [item.id for item in enabled]
		current = ids.index(current_id) if current_id in ids else -1
		n = len(enabled)

		if len(buf) > 1 and buf == buf[0] * len(buf):
			self._buffer = buf[0]
			needle = buf[0]
			start = (current + 1) % n if current >= 0 else 0
		elif len(buf) == 1:
			needle = buf
			start = (current + 1) % n if current >= 0 else 0
		else:
			needle = buf
			start = current if current >= 0 else 0

		match: Optional[str] = None
		for offset in range(n):
			item = enabled[(start + offset) % n]
			if item.label.lower().startswith(needle):
				match = item.id
				break

		self._handle = self._scheduler.call_later(self._timeout_ms, self._expire)
		return match

	def reset(self) -> None:
		self._cancel_timer()
		self._buffer = ""

	def _expire(self) -> None:
		self._handle = None
		self._buffer = ""

	def _cancel_timer(self) -> None:
		if self._handle is not None:
			self._scheduler.cancel(self._handle)
			self._handle = None

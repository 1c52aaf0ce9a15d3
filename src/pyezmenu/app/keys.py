# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key events and key mapping for pyezmenu (key sequence -> intent id).
#
# Notes:
#	- KeyEvent uses DOM-style key names ("ArrowDown", "Enter", " ", ...).
#	- keyseq is the lookup form used by KeyMap:
#		named keys as-is, " " -> "Space", Shift+Tab -> "Shift+Tab",
#		type-ahead characters -> "<char>", anything with Ctrl/Alt/Meta
#		and a printable key -> prefixed (and normally unbound).
#	- from_tk() translates a Tk KeyPress event.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/06/2026	Initial coding / release
# 10/10/2026	Add Tk keysym translation (keypad + ISO_Left_Tab)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pyezmenu.menu.typeahead import is_typeahead_char


CHAR_KEYSEQ = "<char>"

# Tk event.state bits
_TK_SHIFT = 0x0001
_TK_CONTROL = 0x0004
_TK_ALT = 0x0008 | 0x20000
_TK_META = 0x0040

_TK_KEYSYMS: dict[str, str] = {
	"Right": "ArrowRight",
	"Left": "ArrowLeft",
	"Up": "ArrowUp",
	"Down": "ArrowDown",
	"KP_Right": "ArrowRight",
	"KP_Left": "ArrowLeft",
	"KP_Up": "ArrowUp",
	"KP_Down": "ArrowDown",
	"Home": "Home",
	"End": "End",
	"KP_Home": "Home",
	"KP_End": "End",
	"Return": "Enter",
	"KP_Enter": "Enter",
	"space": " ",
	"Escape": "Escape",
	"Tab": "Tab",
	"ISO_Left_Tab": "Tab",
}


@dataclass(frozen=True, slots=True)
class KeyEvent:
	key: str
	shift: bool = False
	ctrl: bool = False
	alt: bool = False
	meta: bool = False

	@property
	def keyseq(self) -> str:
		if self.key == " ":
			return "Space"

		if self.key == "Tab":
			return "Shift+Tab" if self.shift else "Tab"

		if len(self.key) == 1:
			if is_typeahead_char(self.key, ctrl=self.ctrl, alt=self.alt, meta=self.meta):
				return CHAR_KEYSEQ
			mods = [name for name, on in (("Ctrl", self.ctrl), ("Alt", self.alt), ("Meta", self.meta)) if on]
			return "+".join(mods + [self.key])

		return self.key

	@classmethod
	def from_tk(cls, event: Any) -> "KeyEvent":
		keysym = str(getattr(event, "keysym", "") or "")
		char = str(getattr(event, "char", "") or "")
		state = int(getattr(event, "state", 0) or 0)

		shift = bool(state & _TK_SHIFT) or keysym == "ISO_Left_Tab"

		if keysym in _TK_KEYSYMS:
			key = _TK_KEYSYMS[keysym]
		elif len(char) == 1 and char.isprintable():
			key = char
		else:
			key = keysym

		return cls(
			key=key,
			shift=shift,
			ctrl=bool(state & _TK_CONTROL),
			alt=bool(state & _TK_ALT),
			meta=bool(state & _TK_META),
		)


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of key sequences (e.g., "ArrowDown") to intent ids (e.g., "menu.next").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, intent_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not intent_id:
			raise ValueError("intent_id must be a non-empty string")

		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = intent_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def resolve_event(self, event: KeyEvent) -> Optional[str]:
		return self._bindings.get(event.keyseq)

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()

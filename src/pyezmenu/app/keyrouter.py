# ---------------------------------------------------------------------------
# File: keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	KeyRouter for pyezmenu (mode-aware key routing -> intent execution).
#
# Notes:
#	- Layered resolution:
#		1) Keymap of the current menubar mode ("closed", "menu", "submenu")
#		2) Global keymap
#	- The mode is pulled from mode_provider on every event, so the router
#	  never caches controller state.
#	- route() returns the handler's verdict: True means the host should
#	  suppress its default handling of the key.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/06/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from pyezmenu.app.commands import IntentRegistry
from pyezmenu.app.keys import KeyEvent


ModeProvider = Callable[[], Optional[str]]


@runtime_checkable
class KeyMapLike(Protocol):
	"""
	Minimal interface KeyRouter needs from a keymap.
	"""
	def resolve_event(self, event: KeyEvent) -> Optional[str]:
		...


@dataclass(slots=True)
class KeyRouter:
	"""
	KeyRouter

	- KeyEvent -> intent id using layered keymaps
	- intent id -> handler via IntentRegistry
	"""
	registry: IntentRegistry
	global_keymap: KeyMapLike

	mode_keymaps: dict[str, KeyMapLike] = field(default_factory=dict)
	mode_provider: Optional[ModeProvider] = None

	def register_mode_keymap(self, mode: str, keymap: KeyMapLike) -> None:
		self.mode_keymaps[mode] = keymap

	def unregister_mode_keymap(self, mode: str) -> None:
		self.mode_keymaps.pop(mode, None)

	def route(self, event: KeyEvent) -> bool:
		"""
		Route a key event to its intent.

		Returns:
			True if the intent consumed the event, else False (also when unbound).
		"""
		intent_id = self.resolve_intent_id(event)
		if not intent_id or not self.registry.has(intent_id):
			return False

		return self.registry.invoke(intent_id, event)

	def resolve_intent_id(self, event: KeyEvent) -> Optional[str]:
		mode = self.mode_provider() if self.mode_provider else None
		if mode:
			km = self.mode_keymaps.get(mode)
			if km:
				intent_id = km.resolve_event(event)
				if intent_id:
					return intent_id

		return self.global_keymap.resolve_event(event)

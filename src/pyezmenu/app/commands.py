# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Intent definitions + registry for the menubar controller.
#
# Notes:
#	Keymaps resolve keys to intent ids; the registry runs the intent's
#	handler. A handler returns True when it consumed the key event.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/06/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
	from pyezmenu.app.keys import KeyEvent


IntentHandler = Callable[["KeyEvent"], bool]


@dataclass(frozen=True, slots=True)
class Intent:
	"""
	Intent

	- id:			Unique identifier (e.g., "menu.next").
	- handler:		Callable run with the triggering KeyEvent.
	- description:	Optional help text.
	"""
	id: str
	handler: IntentHandler
	description: Optional[str] = None


class IntentRegistry:
	"""
	IntentRegistry

	Stores intents by id and invokes them.
	"""

	def __init__(self) -> None:
		self._intents: dict[str, Intent] = {}

	def register(self, intent: Intent) -> None:
		if not intent.id:
			raise ValueError("Intent id must be a non-empty string")

		if intent.id in self._intents:
			raise ValueError(f"Duplicate intent id: {intent.id!r}")

		self._intents[intent.id] = intent

	def unregister(self, intent_id: str) -> None:
		self._intents.pop(intent_id, None)

	def has(self, intent_id: str) -> bool:
		return intent_id in self._intents

	def get(self, intent_id: str) -> Optional[Intent]:
		return self._intents.get(intent_id)

	def ids(self) -> list[str]:
		return list(self._intents.keys())

	def invoke(self, intent_id: str, event: "KeyEvent") -> bool:
		intent = self._intents.get(intent_id)
		if intent is None:
			raise KeyError(f"Unknown intent id: {intent_id!r}")

		return bool(intent.handler(event))

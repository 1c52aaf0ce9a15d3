# ---------------------------------------------------------------------------
# File: controller.py
# ---------------------------------------------------------------------------
# Description:
#	MenubarController: turns keyboard/pointer input into menu transitions.
#
# Notes:
#	- Owns the whole widget state: MenuState, ToggleStore and TypeAhead.
#	- Keys go through KeyRouter (mode keymap -> intent -> handler); pointer
#	  input has dedicated entry points.
#	- Every entry point returns True when the input was consumed. Nothing
#	  here raises on odd input; only host callbacks may raise.
#	- The outside-pointer listener is attached exactly while a menu is open.
#	- Observers registered with subscribe() are called after each change.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/07/2026	Initial coding / release
# 10/09/2026	Add telemetry for open/close/select/toggle
# 10/11/2026	Add outside-pointer listener lifecycle
# 10/12/2026	Pointer click on items in outer open lists closes inner ones
# 10/17/2026	ArrowRight on a leaf in a nested submenu stays put; hover runs due timers
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

from pyezmenu.app.commands import Intent, IntentRegistry
from pyezmenu.app.default_keys import build_global_keymap, build_mode_keymaps
from pyezmenu.app.keyrouter import KeyMapLike, KeyRouter
from pyezmenu.app.keys import KeyEvent
from pyezmenu.core.config import MenubarConfig
from pyezmenu.core.logging import get_app_logger
from pyezmenu.core.scheduler import ClockScheduler, Scheduler
from pyezmenu.core.telemetry import Telemetry, get_telemetry
from pyezmenu.menu import state as transitions
from pyezmenu.menu.model import (
	FocusableItem,
	MenuAction,
	MenuCheckbox,
	MenuItem,
	MenuRadio,
	MenuRadioGroup,
	MenuSubmenu,
	MenubarEntry,
	is_disabled,
)
from pyezmenu.menu.navigation import (
	Direction,
	Position,
	find_item,
	label_chain,
	lists_along,
	radio_group_of,
	resolve,
	step_index,
)
from pyezmenu.menu.state import CLOSED, MenuState
from pyezmenu.menu.toggles import ToggleStore
from pyezmenu.menu.typeahead import TypeAhead


ItemSelect = Callable[[str], None]
StateObserver = Callable[[MenuState], None]


class OutsideListener(Protocol):
	"""
	Process-wide pointer hook, active only while a menu is open.
	"""
	def attach(self, on_outside: Callable[[], Any]) -> None:
		...

	def detach(self) -> None:
		...


class MenubarController:
	"""
	MenubarController

	Interaction dispatcher for one menubar instance.

	Inputs:
		- entries: Ordered bar entries (each with its item tree)
		- config: MenubarConfig (label, type-ahead timeout, id prefix)
		- on_item_select: Called with the id of an activated action item
		- scheduler: Timer source for the type-ahead reset (ClockScheduler by default)
		- telemetry: Telemetry facade (process-wide instance by default)
		- outside_listener: Optional pointer hook for click-outside closing
	"""

	def __init__(
		self,
		entries: Sequence[MenubarEntry],
		*,
		config: MenubarConfig | None = None,
		on_item_select: ItemSelect | None = None,
		scheduler: Scheduler | None = None,
		telemetry: Telemetry | None = None,
		outside_listener: OutsideListener | None = None,
		mode_keymaps: dict[str, KeyMapLike] | None = None,
		disabled: bool = False,
	) -> None:
		self.entries: tuple[MenubarEntry, ...] = tuple(entries)
		self.config = config if config is not None else MenubarConfig(label="Menubar")
		self.on_item_select = on_item_select
		self.disabled = disabled

		self._scheduler: Scheduler = scheduler if scheduler is not None else ClockScheduler()
		self._telemetry = telemetry if telemetry is not None else get_telemetry()
		self._log = get_app_logger("controller")

		self._outside = outside_listener
		self._outside_attached = False
		self._observers: list[StateObserver] = []

		self.state: MenuState = CLOSED
		self.toggles = ToggleStore(self.entries)
		self.typeahead = TypeAhead(self._scheduler, self.config.typeahead_timeout_ms)

		self.intents = IntentRegistry()
		self._register_intents()

		self.router = KeyRouter(
			registry=self.intents,
			global_keymap=build_global_keymap(),
			mode_keymaps=dict(mode_keymaps) if mode_keymaps is not None else dict(build_mode_keymaps()),
			mode_provider=lambda: self.state.mode.value,
		)

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	@property
	def id_prefix(self) -> str:
		return self.config.id_prefix

	@property
	def open_entry(self) -> Optional[MenubarEntry]:
		if self.state.open_bar_index is None:
			return None
		return self.entries[self.state.open_bar_index]

	def open_lists(self) -> list[tuple[MenuItem, ...]]:
		"""
		Item lists of every open level, outermost first (empty when closed).
		"""
		entry = self.open_entry
		if entry is None:
			return []
		return lists_along(entry, self.state.open_path)

	def current_items(self) -> tuple[MenuItem, ...]:
		levels = self.open_lists()
		return levels[-1] if levels else ()

	def focused_item(self) -> Optional[FocusableItem]:
		return find_item(self.current_items(), self.state.focused_id)

	def is_checked(self, item: MenuCheckbox | MenuRadio, group: MenuRadioGroup | None = None) -> bool:
		if isinstance(item, MenuCheckbox):
			return self.toggles.is_checked(item)
		if group is None:
			return False
		return self.toggles.is_selected(group, item)

	def subscribe(self, observer: StateObserver) -> Callable[[], None]:
		self._observers.append(observer)

		def _unsubscribe() -> None:
			if observer in self._observers:
				self._observers.remove(observer)

		return _unsubscribe

	# -----------------------------------------------------------------------
	# Keyboard
	# -----------------------------------------------------------------------

	def handle_key(self, event: KeyEvent) -> bool:
		"""
		Dispatch one key event. True means "consumed; suppress the default".
		"""
		self._scheduler.run_due()

		if self.disabled or not self.entries:
			return False

		return self.router.route(event)

	# -----------------------------------------------------------------------
	# Pointer / focus
	# -----------------------------------------------------------------------

	def click_bar(self, index: int) -> bool:
		self._scheduler.run_due()
		if self.disabled or not 0 <= index < len(self.entries):
			return False

		if self.state.open_bar_index == index:
			self._close("click")
		else:
			self._open(index, "first")
		return True

	def hover_bar(self, index: int) -> bool:
		self._scheduler.run_due()
		if self.disabled or not self.state.is_open:
			return False
		if not 0 <= index < len(self.entries) or index == self.state.open_bar_index:
			return False

		self._open(index, "first")
		return True

	def click_item(self, item_id: str) -> bool:
		"""
		Activate an item in any open list; deeper submenus close first.
		"""
		self._scheduler.run_due()
		if self.disabled or not self.state.is_open:
			return False

		levels = self.open_lists()
		for depth in range(len(levels) - 1, -1, -1):
			item = find_item(levels[depth], item_id)
			if item is None:
				continue

			new = transitions.truncate_to(self.state, depth)
			self._set_state(transitions.set_focused_item(new, item.id))
			return self._activate(item, levels[depth])

		self._log.debug("click on %r ignored: not in an open menu", item_id)
		return False

	def pointer_outside(self) -> bool:
		if not self.state.is_open:
			return False
		self._close("outside")
		return True

	def focus_out(self) -> bool:
		if not self.state.is_open:
			return False
		self._close("focus_out")
		return True

	def bind_host(
		self,
		*,
		scheduler: Scheduler | None = None,
		outside_listener: OutsideListener | None = None,
	) -> None:
		"""
		Swap in host-provided timers and pointer hook (e.g., once a view mounts).
		"""
		if scheduler is not None:
			self.typeahead.reset()
			self._scheduler = scheduler
			self.typeahead = TypeAhead(scheduler, self.config.typeahead_timeout_ms)

		if outside_listener is not None:
			self._detach_outside()
			self._outside = outside_listener
			self._sync_outside()

	def reset(self) -> None:
		"""
		Return to the closed state (e.g., when the host unmounts the widget).
		"""
		self._close("reset")
		self._detach_outside()

	# -----------------------------------------------------------------------
	# Intents
	# -----------------------------------------------------------------------

	def _register_intents(self) -> None:
		table: list[tuple[str, Callable[[KeyEvent], bool], str]] = [
			("bar.next", lambda e: self._move_bar(+1), "Focus next bar entry"),
			("bar.prev", lambda e: self._move_bar(-1), "Focus previous bar entry"),
			("bar.first", lambda e: self._focus_bar(0), "Focus first bar entry"),
			("bar.last", lambda e: self._focus_bar(len(self.entries) - 1), "Focus last bar entry"),
			("bar.open_first", lambda e: self._open_focused_entry("first"), "Open dropdown at first item"),
			("bar.open_last", lambda e: self._open_focused_entry("last"), "Open dropdown at last item"),
			("bar.switch_prev", lambda e: self._switch_bar(-1), "Open previous bar entry's dropdown"),
			("menu.next", lambda e: self._move_in_list("next"), "Focus next item"),
			("menu.prev", lambda e: self._move_in_list("prev"), "Focus previous item"),
			("menu.first", lambda e: self._move_in_list("first"), "Focus first item"),
			("menu.last", lambda e: self._move_in_list("last"), "Focus last item"),
			("menu.expand", lambda e: self._expand(), "Enter submenu or open next bar entry"),
			("menu.activate", lambda e: self._activate(self.focused_item(), self.current_items()), "Activate focused item"),
			("menu.close", lambda e: self._escape_dropdown(), "Close dropdown, focus bar entry"),
			("menu.typeahead", self._typeahead, "Type-ahead search"),
			("submenu.exit", lambda e: self._exit_submenu(), "Close innermost submenu"),
			("focus.leave", lambda e: self._leave(), "Close all and let focus leave"),
		]
		for intent_id, handler, description in table:
			self.intents.register(Intent(id=intent_id, handler=handler, description=description))

	def _move_bar(self, delta: int) -> bool:
		return self._focus_bar(step_index(self.state.bar_focus_index, len(self.entries), delta))

	def _focus_bar(self, index: int) -> bool:
		self._set_state(transitions.focus_bar(self.state, self.entries, index))
		return True

	def _open_focused_entry(self, position: Position) -> bool:
		self._open(self.state.bar_focus_index, position)
		return True

	def _switch_bar(self, delta: int) -> bool:
		if self.state.open_bar_index is None:
			return False
		index = step_index(self.state.open_bar_index, len(self.entries), delta)
		self._open(index, "first", fresh=True)
		return True

	def _move_in_list(self, direction: Direction) -> bool:
		target = resolve(self.current_items(), self.state.focused_id, direction)
		if target is not None:
			self._set_state(transitions.set_focused_item(self.state, target))
		return True

	def _expand(self) -> bool:
		item = self.focused_item()
		if isinstance(item, MenuSubmenu):
			self._enter(item)
			return True
		# Only the top-level dropdown hands off to the next bar entry.
		if self.state.depth > 0:
			return True
		return self._switch_bar(+1)

	def _exit_submenu(self) -> bool:
		self._set_state(transitions.exit_submenu(self.state))
		self._log.debug("submenu closed; focus back on %r", self.state.focused_id)
		return True

	def _escape_dropdown(self) -> bool:
		self._close("escape")
		return True

	def _leave(self) -> bool:
		self._close("tab")
		return False

	def _typeahead(self, event: KeyEvent) -> bool:
		target = self.typeahead.search(event.key, self.current_items(), self.state.focused_id)
		if target is None:
			self._telemetry.counter("menubar.typeahead.miss", 1, {"buffer": self.typeahead.buffer})
		else:
			self._set_state(transitions.set_focused_item(self.state, target))
		return True

	# -----------------------------------------------------------------------
	# Activation
	# -----------------------------------------------------------------------

	def _activate(self, item: Optional[FocusableItem], items: Sequence[MenuItem]) -> bool:
		if item is None:
			return True

		if is_disabled(item):
			self._log.debug("activation of disabled item %r ignored", item.id)
			return True

		if isinstance(item, MenuAction):
			self._select(item)
		elif isinstance(item, MenuCheckbox):
			checked = self.toggles.toggle_checkbox(item)
			self._telemetry.event("menubar.toggle", {"item_id": item.id, "checked": checked})
			self._notify()
		elif isinstance(item, MenuRadio):
			group = radio_group_of(items, item.id)
			if group is None:
				self._log.info("radio %r is not inside a radio group; ignored", item.id)
				return True
			if self.toggles.select_radio(group, item):
				self._telemetry.event("menubar.radio", {"group": group.name, "item_id": item.id})
				self._notify()
		elif isinstance(item, MenuSubmenu):
			self._enter(item)

		return True

	def _select(self, item: MenuAction) -> None:
		entry = self.open_entry
		if entry is not None:
			path = " > ".join(label_chain(entry, self.state.open_path, item.id))
			self._telemetry.event("menubar.select", {"item_id": item.id, "menu_path": path})

		self._log.debug("item selected: %r", item.id)
		if self.on_item_select is not None:
			self.on_item_select(item.id)

		self._close("select")

	def _enter(self, submenu: MenuSubmenu) -> None:
		new = transitions.enter_submenu(self.state, submenu, "first")
		if new is self.state:
			self._log.debug("submenu %r not entered (disabled or not focused)", submenu.id)
			return
		self._set_state(new)
		self._log.debug("submenu %r opened; depth=%d", submenu.id, self.state.depth)

	# -----------------------------------------------------------------------
	# State plumbing
	# -----------------------------------------------------------------------

	def _open(self, index: int, position: Position, *, fresh: bool = False) -> None:
		base = transitions.close_all(self.state) if fresh else self.state
		new = transitions.open_bar(base, self.entries, index, position)
		if new == self.state:
			return

		self._set_state(new)
		self._telemetry.event("menubar.open", {"entry_id": self.entries[index].id, "position": position})
		self._log.debug("dropdown %r opened; focus=%r", self.entries[index].id, self.state.focused_id)

	def _close(self, reason: str) -> None:
		if not self.state.is_open:
			return

		entry = self.open_entry
		self._set_state(transitions.close_all(self.state))
		self._telemetry.event("menubar.close", {"reason": reason, "entry_id": entry.id if entry else None})
		self._log.debug("menus closed (%s)", reason)

	def _set_state(self, new: MenuState) -> None:
		old = self.state
		if new == old:
			return

		self.state = new

		if old.is_open and not new.is_open:
			self.typeahead.reset()

		self._sync_outside()
		self._notify()

	def _notify(self) -> None:
		for observer in list(self._observers):
			observer(self.state)

	def _sync_outside(self) -> None:
		if self.state.is_open and not self._outside_attached:
			if self._outside is not None:
				self._outside.attach(self.pointer_outside)
				self._outside_attached = True
		elif not self.state.is_open:
			self._detach_outside()

	def _detach_outside(self) -> None:
		if self._outside_attached and self._outside is not None:
			self._outside.detach()
		self._outside_attached = False

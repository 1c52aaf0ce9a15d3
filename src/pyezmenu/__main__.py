# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Demo window: python -m pyezmenu
#
# Notes:
#	- Log and telemetry output go to the console at DEBUG so every
#	  transition is visible while poking at the bar.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from pyezmenu.app.controller import MenubarController
from pyezmenu.core.config import MenubarConfig
from pyezmenu.core.logging import get_app_logger, init_logging
from pyezmenu.core.telemetry import init_telemetry
from pyezmenu.menu.model import (
	MenuAction,
	MenuCheckbox,
	MenuRadio,
	MenuRadioGroup,
	MenuSeparator,
	MenuSubmenu,
	MenubarEntry,
)
from pyezmenu.ui.menubar import MenubarView


def build_entries(log) -> list[MenubarEntry]:
	"""
	Sample tree covering every item kind.
	"""
	return [
		MenubarEntry(
			"file",
			"File",
			[
				MenuAction("new", "New"),
				MenuAction("open", "Open"),
				MenuSubmenu(
					"recent",
					"Open Recent",
					[MenuAction("doc1", "notes.txt"), MenuAction("doc2", "todo.md")],
				),
				MenuSeparator("file-sep"),
				MenuAction("save", "Save"),
				MenuAction("save-as", "Save As", disabled=True),
				MenuAction("quit", "Quit"),
			],
		),
		MenubarEntry(
			"view",
			"View",
			[
				MenuCheckbox("autosave", "AutoSave", on_checked_change=lambda v: log.info("autosave=%s", v)),
				MenuCheckbox("wordwrap", "Word Wrap", checked=True),
				MenuSeparator("view-sep"),
				MenuRadioGroup(
					"theme-group",
					"theme",
					"Theme",
					[MenuRadio("light", "Light", checked=True), MenuRadio("dark", "Dark"), MenuRadio("system", "System")],
					on_value_change=lambda v: log.info("theme=%s", v),
				),
			],
		),
		MenubarEntry("help", "Help", [MenuAction("about", "About")]),
	]


def main() -> None:
	cfg = MenubarConfig.from_options(
		{
			"label": "Demo",
			"log_level": "DEBUG",
			"telemetry_enabled": True,
			"telemetry_sink": "log",
		}
	)
	init_logging(cfg)
	log = get_app_logger("demo")
	init_telemetry(cfg, get_app_logger("telemetry"))

	root = tk.Tk()
	root.title("pyezmenu")
	root.geometry("480x240")

	status = tk.StringVar(value="Press Tab to focus the bar, or click an entry.")

	def on_select(item_id: str) -> None:
		status.set(f"selected: {item_id}")
		if item_id == "quit":
			root.after_idle(root.destroy)

	controller = MenubarController(build_entries(log), config=cfg, on_item_select=on_select)
	view = MenubarView(name="menubar", controller=controller)
	view.mount(root)

	ttk.Label(root, textvariable=status, padding=12).pack(fill="x")
	root.mainloop()


if __name__ == "__main__":
	main()

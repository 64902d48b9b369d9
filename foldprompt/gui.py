"""Desktop window for browsing folders and assembling a prompt."""

from __future__ import annotations

import argparse
import tkinter as tk
from pathlib import Path
from tkinter import filedialog

from .manager import FileManager, folder_display_name, item_label

TITLE = "File Manager"
FOLDER_COLOUR = "#0080ff"
PANEL_COLOUR = "#00b300"
STATS_COLOUR = "#4d4d4d"
SIZE_COLOUR = "#808080"


class FileManagerWindow:
    """Toolbar, scrollable folder listing and optional prompt panel."""

    def __init__(self, root, manager: FileManager | None = None) -> None:
        self.root = root
        self.manager = manager if manager is not None else FileManager()
        self._variables: list = []

        toolbar = tk.Frame(root)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=20, pady=(20, 10))
        self.add_button = tk.Button(
            toolbar, text="Add Folder", command=self.on_add_folder, padx=10, pady=10
        )
        self.add_button.pack(side=tk.LEFT, padx=(0, 10))
        self.build_button = tk.Button(
            toolbar, command=self.on_build_prompt, padx=10, pady=10
        )
        self.build_button.pack(side=tk.LEFT, padx=(0, 10))
        self.panel_button = tk.Button(
            toolbar, command=self.on_toggle_panel, padx=10, pady=10
        )
        self.panel_button.pack(side=tk.LEFT)

        body = tk.Frame(root)
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=20, pady=(0, 20))
        canvas = tk.Canvas(body, highlightthickness=0)
        scrollbar = tk.Scrollbar(body, orient=tk.VERTICAL, command=canvas.yview)
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.content = tk.Frame(canvas)
        canvas.create_window((0, 0), window=self.content, anchor="nw")
        self.content.bind(
            "<Configure>", lambda _event: canvas.configure(scrollregion=canvas.bbox("all"))
        )

        self.refresh()

    def refresh(self) -> None:
        """Rebuild the listing and panel from the manager's state."""
        for child in self.content.winfo_children():
            child.destroy()
        self._variables = []

        has_files = self.manager.prompt_builder.file_count() > 0
        self.build_button.configure(
            text=self.manager.build_button_label(),
            state="normal" if has_files else "disabled",
        )
        self.panel_button.configure(text=self.manager.panel_button_label())

        for folder in self.manager.folders:
            section = tk.Frame(self.content)
            section.pack(fill=tk.X, anchor="w", pady=(0, 20))
            tk.Label(
                section,
                text=f"Folder: {folder_display_name(folder.path)}",
                fg=FOLDER_COLOUR,
                font=("TkDefaultFont", 14),
            ).pack(anchor="w", pady=(0, 10))
            for item in folder.items:
                variable = tk.BooleanVar(master=self.root, value=item.selected)
                self._variables.append(variable)
                tk.Checkbutton(
                    section,
                    text=item_label(item),
                    variable=variable,
                    command=lambda path=item.path, selected=not item.selected: self._toggle_item(
                        path, selected
                    ),
                ).pack(anchor="w")

        if self.manager.show_prompt_panel:
            self._build_panel()

    def _build_panel(self) -> None:
        panel = tk.Frame(
            self.content,
            highlightbackground=PANEL_COLOUR,
            highlightthickness=1,
            padx=10,
            pady=10,
        )
        panel.pack(fill=tk.X, anchor="w")
        tk.Label(
            panel, text="Prompt State", fg=PANEL_COLOUR, font=("TkDefaultFont", 14)
        ).pack(anchor="w", pady=(0, 10))
        tk.Label(
            panel, text=self.manager.stats_text(), fg=STATS_COLOUR, font=("TkDefaultFont", 9)
        ).pack(anchor="w", pady=(0, 10))
        for display_name, size in self.manager.prompt_builder.file_info():
            row = tk.Frame(panel)
            row.pack(fill=tk.X, anchor="w")
            tk.Label(row, text=f"📄 {display_name}").pack(side=tk.LEFT)
            tk.Label(row, text=size, fg=SIZE_COLOUR, font=("TkDefaultFont", 9)).pack(
                side=tk.LEFT, padx=(10, 0)
            )

    def _toggle_item(self, path: Path, selected: bool) -> None:
        self.manager.toggle_item(path, selected)
        self.refresh()

    def on_add_folder(self) -> None:
        """Ask for a folder and open it."""
        chosen = filedialog.askdirectory(parent=self.root)
        if chosen:
            self.manager.add_folder(chosen)
            self.refresh()

    def on_build_prompt(self) -> None:
        """Build the prompt from the selected files and print it."""
        prompt = self.manager.build_prompt()
        print(f"Built prompt:\n{prompt}")

    def on_toggle_panel(self) -> None:
        self.manager.toggle_prompt_panel()
        self.refresh()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="foldprompt",
        description="Browse folders and assemble selected files into a prompt.",
    )
    parser.parse_args(argv)

    root = tk.Tk()
    root.title(TITLE)
    root.geometry("600x500")
    root.minsize(400, 300)
    FileManagerWindow(root)
    root.mainloop()
    return 0
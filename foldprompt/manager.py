"""Folder browsing state and the selection that feeds the prompt builder."""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass, field
from pathlib import Path

from .prompt_builder import PromptBuilder, PromptError


def _name_of(path: Path) -> str:
    return path.name or "/"


@dataclass
class FileSystemItem:
    """An entry shown inside a folder listing."""

    path: Path
    name: str
    is_file: bool
    selected: bool = False

    @staticmethod
    def from_path(path: str | os.PathLike[str]) -> FileSystemItem:
        path = Path(path)
        return FileSystemItem(path=path, name=_name_of(path), is_file=path.is_file())


@dataclass
class Folder:
    """A folder that was opened, with its direct entries."""

    path: Path
    items: list[FileSystemItem] = field(default_factory=list)


def folder_display_name(path: str | os.PathLike[str]) -> str:
    """The last component of a folder path, or '/' for the root."""
    return _name_of(Path(path))


def item_label(item: FileSystemItem) -> str:
    """The text shown for an item, with a file or folder icon."""
    icon = "📄" if item.is_file else "📁"
    return f"{icon} {item.name}"


class FileManager:
    """Opened folders, selected items and the prompt they build."""

    def __init__(self) -> None:
        self.folders: list[Folder] = []
        self.prompt_builder = PromptBuilder()
        self.show_prompt_panel = False

    def add_folder(self, path: str | os.PathLike[str]) -> Folder | None:
        """Open a folder and list its entries; return None if it cannot be read."""
        path = Path(path)
        try:
            with os.scandir(path) as scanner:
                items = [FileSystemItem.from_path(entry.path) for entry in scanner]
        except OSError:
            return None
        folder = Folder(path=path, items=items)
        self.folders.append(folder)
        return folder

    def toggle_item(self, path: str | os.PathLike[str], selected: bool) -> None:
        """Mark an item selected or not and add it to or remove it from the prompt."""
        path = Path(path)
        for folder in self.folders:
            item = next((item for item in folder.items if item.path == path), None)
            if item is not None:
                item.selected = selected

        if selected:
            with suppress(PromptError):
                if path.is_file():
                    self.prompt_builder.add_file(path)
                elif path.is_dir():
                    self.prompt_builder.add_directory(path)
        elif path.is_file():
            self.prompt_builder.remove_file(path)
        elif path.is_dir():
            self.prompt_builder.remove_directory(path)

    def build_prompt(self) -> str:
        return self.prompt_builder.build_prompt()

    def toggle_prompt_panel(self) -> bool:
        """Flip the prompt panel's visibility and return the new state."""
        self.show_prompt_panel = not self.show_prompt_panel
        return self.show_prompt_panel

    def build_button_label(self) -> str:
        count = self.prompt_builder.file_count()
        if count > 0:
            return f"Build Prompt ({count})"
        return "Build Prompt (0 files)"

    def panel_button_label(self) -> str:
        return "Hide Prompt Panel" if self.show_prompt_panel else "Show Prompt Panel"

    def stats_text(self) -> str:
        builder = self.prompt_builder
        return (
            f"Files: {len(builder.file_info())} total "
            f"({builder.readable_files_count()} readable, "
            f"{builder.unreadable_files_count()} unreadable)"
        )
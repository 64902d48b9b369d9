"""Collect file references and assemble them into a single text prompt."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


class PromptError(Exception):
    """Raised when a file or directory cannot be added to a prompt."""


@dataclass(frozen=True)
class FileReference:
    """A file that is part of the prompt, by path only."""

    path: Path
    display_name: str
    order: int


@dataclass
class PromptState:
    """Everything the prompt is made from."""

    file_contexts: list[FileReference] = field(default_factory=list)
    user_instructions: str | None = None
    system_prompts: list[str] = field(default_factory=list)
    next_order: int = 0


def _list_directory(directory: Path) -> list[Path]:
    try:
        scanner = os.scandir(directory)
    except OSError as exc:
        raise PromptError(f"Failed to read directory: {exc}") from exc
    with scanner:
        try:
            return [Path(entry.path) for entry in scanner]
        except OSError as exc:
            raise PromptError(f"Failed to read entry: {exc}") from exc


class PromptBuilder:
    """Keeps an ordered list of files and builds a prompt from their contents."""

    def __init__(self) -> None:
        self.state = PromptState()

    def _contains(self, path: Path) -> bool:
        return any(ref.path == path for ref in self.state.file_contexts)

    def add_file(self, path: str | os.PathLike[str]) -> None:
        """Add one file; raise PromptError if it is already present or missing."""
        path = Path(path)
        if self._contains(path):
            raise PromptError("File already in prompt")
        if not path.exists():
            raise PromptError("File does not exist")
        display_name = path.name or str(path)
        self.state.file_contexts.append(
            FileReference(path, display_name, self.state.next_order)
        )
        self.state.next_order += 1

    def add_directory(self, dir_path: str | os.PathLike[str]) -> int:
        """Add every file below a directory, recursively; return how many were added."""
        dir_path = Path(dir_path)
        if not dir_path.is_dir():
            raise PromptError("Path is not a directory")
        added = self._add_directory_recursive(dir_path, 0)
        self.state.next_order += added
        return added

    def _add_directory_recursive(self, directory: Path, count: int) -> int:
        for path in _list_directory(directory):
            if path.is_file():
                if not self._contains(path):
                    display_name = str(path.relative_to(directory))
                    self.state.file_contexts.append(
                        FileReference(path, display_name, self.state.next_order + count)
                    )
                    count += 1
            elif path.is_dir():
                count = self._add_directory_recursive(path, count)
        return count

    def remove_file(self, path: str | os.PathLike[str]) -> None:
        """Drop the reference to exactly this path."""
        path = Path(path)
        self.state.file_contexts = [
            ref for ref in self.state.file_contexts if ref.path != path
        ]

    def remove_directory(self, dir_path: str | os.PathLike[str]) -> None:
        """Drop every reference that lies at or below a directory."""
        dir_path = Path(dir_path)
        self.state.file_contexts = [
            ref for ref in self.state.file_contexts if not ref.path.is_relative_to(dir_path)
        ]

    def clear(self) -> None:
        """Forget all files and restart ordering."""
        self.state.file_contexts.clear()
        self.state.next_order = 0

    def files(self) -> list[FileReference]:
        """The file references in insertion order."""
        return list(self.state.file_contexts)

    def file_count(self) -> int:
        return len(self.state.file_contexts)

    def build_prompt(self) -> str:
        """Read every referenced file and join them under headers."""
        parts = []
        for ref in self.state.file_contexts:
            parts.append(f"=== File: {ref.display_name} ===\n")
            try:
                content = ref.path.read_bytes().decode("utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                parts.append(f"Error reading file: {exc}\n\n")
            else:
                parts.append(content)
                parts.append("\n\n")
        return "".join(parts)

    def file_info(self) -> list[tuple[str, str]]:
        """Pairs of display name and size text, without reading contents."""
        info = []
        for ref in self.state.file_contexts:
            try:
                size = f"{ref.path.stat().st_size} bytes"
            except OSError:
                size = "Unknown size"
            info.append((ref.display_name, size))
        return info

    def file_exists(self, path: str | os.PathLike[str]) -> bool:
        return Path(path).exists()

    def readable_files_count(self) -> int:
        return sum(1 for ref in self.state.file_contexts if ref.path.is_file())

    def unreadable_files_count(self) -> int:
        return sum(1 for ref in self.state.file_contexts if not ref.path.is_file())
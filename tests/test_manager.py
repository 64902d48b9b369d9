from pathlib import Path

import pytest

from foldprompt.manager import FileManager, FileSystemItem, folder_display_name, item_label


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "a.txt").write_text("alpha")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("beta")
    (sub / "c.txt").write_text("gamma")
    return tmp_path


def test_item_from_file(tree):
    item = FileSystemItem.from_path(tree / "a.txt")
    assert item.name == "a.txt"
    assert item.is_file is True
    assert item.selected is False


def test_item_from_directory(tree):
    item = FileSystemItem.from_path(str(tree / "sub"))
    assert item.path == tree / "sub"
    assert item.is_file is False


def test_root_names():
    assert FileSystemItem.from_path("/").name == "/"
    assert folder_display_name("/") == "/"


def test_folder_display_name(tree):
    assert folder_display_name(tree / "sub") == "sub"


def test_item_labels(tree):
    assert item_label(FileSystemItem.from_path(tree / "a.txt")) == "📄 a.txt"
    assert item_label(FileSystemItem.from_path(tree / "sub")) == "📁 sub"


def test_add_folder_lists_entries(tree):
    manager = FileManager()
    folder = manager.add_folder(tree)
    assert manager.folders == [folder]
    assert {item.name for item in folder.items} == {"a.txt", "sub"}


def test_add_unreadable_folder_is_ignored(tmp_path):
    manager = FileManager()
    assert manager.add_folder(tmp_path / "missing") is None
    assert manager.folders == []


def test_toggle_file(tree):
    manager = FileManager()
    folder = manager.add_folder(tree)
    target = tree / "a.txt"
    manager.toggle_item(target, True)
    item = next(i for i in folder.items if i.path == target)
    assert item.selected is True
    assert [ref.path for ref in manager.prompt_builder.files()] == [target]
    manager.toggle_item(target, False)
    assert item.selected is False
    assert manager.prompt_builder.file_count() == 0


def test_toggle_directory(tree):
    manager = FileManager()
    manager.add_folder(tree)
    manager.toggle_item(tree / "sub", True)
    assert {ref.path for ref in manager.prompt_builder.files()} == {
        tree / "sub" / "b.txt",
        tree / "sub" / "c.txt",
    }
    manager.toggle_item(tree / "sub", False)
    assert manager.prompt_builder.file_count() == 0


def test_toggle_existing_file_is_silent(tree):
    manager = FileManager()
    manager.add_folder(tree)
    manager.toggle_item(tree / "a.txt", True)
    manager.toggle_item(tree / "a.txt", True)
    assert manager.prompt_builder.file_count() == 1


def test_build_button_label(tree):
    manager = FileManager()
    assert manager.build_button_label() == "Build Prompt (0 files)"
    manager.add_folder(tree)
    manager.toggle_item(tree / "a.txt", True)
    assert manager.build_button_label() == "Build Prompt (1)"


def test_prompt_panel_toggle():
    manager = FileManager()
    assert manager.panel_button_label() == "Show Prompt Panel"
    assert manager.toggle_prompt_panel() is True
    assert manager.panel_button_label() == "Hide Prompt Panel"
    assert manager.toggle_prompt_panel() is False
    assert manager.show_prompt_panel is False


def test_stats_text(tree):
    manager = FileManager()
    manager.add_folder(tree)
    manager.toggle_item(tree / "sub", True)
    (tree / "sub" / "b.txt").unlink()
    assert manager.stats_text() == "Files: 2 total (1 readable, 1 unreadable)"


def test_build_prompt_matches_builder(tree):
    manager = FileManager()
    manager.add_folder(tree)
    manager.toggle_item(tree / "a.txt", True)
    assert manager.build_prompt() == manager.prompt_builder.build_prompt()
    assert "alpha" in manager.build_prompt()
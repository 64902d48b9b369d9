# foldprompt

foldprompt is a small desktop file manager. It does one job. You pick files
and folders, and it joins their contents into a single block of text that you
can paste into a prompt.

## Installing

```
pip install .
```

The window uses Tk, which comes with most Python installations. The package
has no other dependencies.

## Running

```
foldprompt
```

The command takes no options other than `--help`. It opens a window titled
"File Manager" with three buttons:

- **Add Folder** asks you to pick a folder. It then lists the entries directly
  inside that folder, each with a file or folder icon.
- **Build Prompt (N)** joins every selected file into one prompt and prints it
  on standard output, after the line `Built prompt:`. When nothing is
  selected, the button reads "Build Prompt (0 files)" and is disabled.
- **Show Prompt Panel** / **Hide Prompt Panel** shows or hides a panel that
  lists the selected files with their sizes. The panel also has a summary line,
  `Files: T total (R readable, U unreadable)`, where a file counts as readable
  if it still exists as a regular file.

To select an item, tick the box next to it. Ticking a file adds it to the
prompt. Ticking a folder adds every file below it, at any depth; files that are
already in the prompt are skipped. Unticking a file removes it again.
Unticking a folder removes every selected file at or below that folder.

## Using it from Python

You can use the prompt logic without the window:

```python
from foldprompt.prompt_builder import PromptBuilder, PromptError

builder = PromptBuilder()
builder.add_file("notes.txt")
added = builder.add_directory("project")   # number of files newly added
print(builder.file_count())
print(builder.file_info())                 # [(display name, "123 bytes"), ...]
print(builder.build_prompt())
```

`PromptBuilder` also has these methods:

- `remove_file` and `remove_directory` take files out of the prompt.
- `clear` empties the prompt.
- `files` returns the `FileReference` entries (path, display name, order) in
  the order they were added.
- `readable_files_count` and `unreadable_files_count` count the entries that
  are, or are not, still regular files.

Each file in the prompt starts with a header line and ends with a blank line:

```
=== File: <name> ===
<contents>

```

The name shown is the file's own name, both for a file added alone and for a
file found inside a folder. The builder reads each file as UTF-8. If it cannot
read a file or decode it, the file's contents are replaced with
`Error reading file: <reason>`.

`add_file` and `add_directory` raise `PromptError` in these cases:

- the file passed to `add_file` is already in the prompt;
- the path passed to `add_file` does not exist;
- the path passed to `add_directory` is not a folder;
- a folder or one of its entries cannot be read.

`foldprompt.manager.FileManager` holds the state behind the window: the
listed folders (`Folder` and `FileSystemItem`), which items are selected, and
whether the panel is shown. Its methods are `add_folder`, `toggle_item`,
`build_prompt`, `toggle_prompt_panel`, `build_button_label`,
`panel_button_label` and `stats_text`. None of them needs a display.

## What it does not do

- The built prompt is only printed to standard output. The window does not
  show it, and nothing copies it to the clipboard or saves it to a file.
- A folder listing shows only the entries directly inside that folder. You
  cannot open subfolders in the window; tick one to add all of its files.
- Selections are not saved between runs.

## Tests

```
pip install .[test]
pytest
```
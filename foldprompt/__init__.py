"""Gather selected files and folders into a single text prompt, with a Tk window to pick them."""

__version__ = "0.1.0"
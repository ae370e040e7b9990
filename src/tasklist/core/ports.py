# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store only knows about these Protocols; hosts (console, tests) plug in
their own implementations.
"""

from typing import Protocol


class TitleSink(Protocol):
    """
    Host-side port: reflect the active filter in the environment.

    A graphical host would set the document title; the console host sets the
    terminal window title.
    """

    def set_title(self, title: str) -> None: ...

# src/tasklist/connectors/terminal_title.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class TerminalTitleSink:
    """
    TitleSink for terminals: OSC 0 sets the window title.

    Off a TTY (pipes, CI) the escape sequence is skipped and the title is only logged.
    """

    def __init__(self, stream: TextIO | None = None, *, enabled: bool = True) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._enabled = enabled
        self.last_title: str | None = None

    def _is_tty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def set_title(self, title: str) -> None:
        self.last_title = title
        logger.debug("Title: %s", title)
        if not self._enabled or not self._is_tty():
            return
        self._stream.write(f"\033]0;{title}\007")
        self._stream.flush()

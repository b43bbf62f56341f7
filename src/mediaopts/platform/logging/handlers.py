"""Rich console handler rendering argument resolution events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that styles records carrying an ``args_event`` extra."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "files.canonicalize.failed": ("⚠️", "yellow"),
        "files.folder.expanded": ("📂", "cyan"),
        "args.parse.failed": ("❌", "red"),
        "values.illegal": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "files.canonicalize.failed": "Could not canonicalize ",
        "files.folder.expanded": "Expanded folder ",
        "args.parse.failed": "Invalid command line ",
        "values.illegal": "Illegal value ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("rich_tracebacks", True)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` with highlighted separators, keeping its last segments."""

        pure_path: PurePath = PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        parts = [part for part in pure_path.parts if part and part != anchor]

        display = anchor.rstrip("\\/") + separator if anchor else ""
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]
            display = (display or "") + "…" + separator
        display += separator.join(parts)

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "args_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, ""))

        path = getattr(record, "path", None)
        token = getattr(record, "token", None)
        if path:
            _ = body.append_text(self._format_path(str(path)))
        elif token is not None:
            _ = body.append(repr(token))

        details: list[str] = []
        count = getattr(record, "count", None)
        if isinstance(count, int):
            details.append(f"{count} files")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = self._render_event(record)
        if rendered is not None:
            return rendered
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]

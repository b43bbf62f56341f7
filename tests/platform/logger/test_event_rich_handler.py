"""Tests for the ``EventRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from mediaopts.platform.logging import EventRichHandler, setup_logger


def _make_handler() -> EventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return EventRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="mediaopts",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="plain message",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_truncates_long_paths() -> None:
    """Deep folder paths keep only their last segments."""

    handler = _make_handler()
    record = _build_record(
        args_event="files.folder.expanded",
        path="/media/library/tv/Show/Season 01/Extras",
        count=12,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Expanded folder" in plain
    assert "…/tv/Show/Season 01/Extras" in plain
    assert "/media/library" not in plain
    assert "(12 files)" in plain


def test_render_message_shows_parse_failure_token() -> None:
    handler = _make_handler()
    record = _build_record(args_event="args.parse.failed", token="-bogus", error_message="Unrecognized option")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "'-bogus'" in rendered.plain
    assert "Unrecognized option" in rendered.plain


def test_render_message_without_event_uses_default_rendering() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_replaces_handlers_and_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "mediaopts.log"
    console = Console(file=StringIO())

    first = setup_logger(console=console)
    configured = setup_logger(log_file=log_file, console_level=logging.WARNING, console=console)

    try:
        assert configured is first
        assert len(configured.handlers) == 2
        assert configured.level == logging.DEBUG

        configured.debug("written to file only")
        for handler in configured.handlers:
            handler.flush()

        assert "written to file only" in log_file.read_text(encoding="utf-8")
        assert "written to file only" not in console.file.getvalue()  # type: ignore[attr-defined]
    finally:
        for handler in list(configured.handlers):
            handler.close()
        configured.handlers.clear()
        configured.setLevel(logging.NOTSET)

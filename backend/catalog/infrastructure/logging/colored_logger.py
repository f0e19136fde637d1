"""Colored save logger — ANSI-colored console logging for the group save sequence.

Saving a music group is a chain of independent persistence calls. This
logger tags each line with the phase it belongs to, so a partially applied
save can be traced step by step in the terminal.

Color scheme:
    🟢 Green   — Validation / Completion
    🔵 Blue    — Root create / update
    🟡 Yellow  — Deletes
    🟣 Magenta — Inserts
    🟠 Cyan    — Re-reads
    ⚪ White   — Updates
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Save Stage Definitions ───────────────────────────────────────────

class SaveStage:
    """Phases of a save, with colors and icons."""

    VALIDATE = ("VALIDATE", _Colors.GREEN, "🔎")
    CREATE_ROOT = ("CREATE_ROOT", _Colors.BLUE, "🆕")
    DELETE = ("DELETE", _Colors.YELLOW, "🗑️")
    INSERT = ("INSERT", _Colors.MAGENTA, "➕")
    REREAD = ("REREAD", _Colors.CYAN, "🔄")
    UPDATE = ("UPDATE", _Colors.WHITE, "✏️")
    UPDATE_ROOT = ("UPDATE_ROOT", _Colors.BLUE, "💾")
    ERROR = ("ERROR", _Colors.RED, "❌")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


def _format_details(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())


# ── SaveLogger ───────────────────────────────────────────────────────

class SaveLogger:
    """Color-coded logger for aggregate saves.

    Usage:
        log = SaveLogger("ChildCollectionReconciler")
        log.step_start(SaveStage.DELETE, "Deleting 2 album(s)", group_id=gid)
        log.detail("Album already absent", id=album_id)
        log.step_complete(SaveStage.DELETE, "Deleted 2 album(s)")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed step in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            formatted += f" {_Colors.DIM}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.debug(formatted)

    def separator(self, title: str = "") -> None:
        if title:
            self._logger.info(
                f"{_Colors.GRAY}{'─' * 10} {title} {'─' * max(0, 50 - len(title))}{_Colors.RESET}"
            )
        else:
            self._logger.info(f"{_Colors.GRAY}{'─' * 60}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time and re-raises failures.

        Usage:
            with log.timed_step(SaveStage.REREAD, "Re-reading aggregate"):
                group = await repository.get_aggregate(group_id)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s", **kwargs)

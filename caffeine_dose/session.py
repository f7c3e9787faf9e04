"""Keep-awake session status derived from the running caffeinate process"""

import os
import re
from datetime import datetime, timedelta
from typing import Optional, Tuple

from .config import config
from .models import ProcessSnapshot, SessionStatus
from .process_query import ProcessQuery, ProcessQueryError
from .timefmt import display_sleep_note, format_clock, format_remaining
from . import ui

# caffeinate options that consume a value
_VALUE_OPTIONS = 'tw'


def parse_invocation_args(args: str, process_name: str = 'caffeinate') -> Tuple[bool, Optional[int]]:
    """
    Read the caffeinate options out of a command line

    Options may be given separately ("-d -t 600") or combined ("-dt600",
    "-di"). Scanning stops at the first non-option word, which starts the
    utility caffeinate was asked to run.

    Args:
        args: Command line, with or without the leading executable
        process_name: Executable name skipped when the command line starts with it

    Returns:
        (keeps_display_awake, timeout_seconds) where timeout_seconds is None
        if there is no -t option or its value is not a whole number
    """
    tokens = args.split()
    if tokens and os.path.basename(tokens[0]) == process_name:
        tokens = tokens[1:]

    keeps_display = False
    timeout_text = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == '--' or not token.startswith('-') or len(token) < 2:
            break

        letters = token[1:]
        for pos, letter in enumerate(letters):
            if letter == 'd':
                keeps_display = True
            elif letter in _VALUE_OPTIONS:
                value = letters[pos + 1:]
                if not value and i + 1 < len(tokens):
                    i += 1
                    value = tokens[i]
                if letter == 't':
                    timeout_text = value
                break
        i += 1

    if timeout_text is None or not re.fullmatch(r'[0-9]+', timeout_text):
        return keeps_display, None
    return keeps_display, int(timeout_text)


def derive_status(snapshot: Optional[ProcessSnapshot], now: datetime, poll_threshold: int = 3600) -> SessionStatus:
    """
    Derive the session status from one process snapshot

    Args:
        snapshot: Keep-awake process facts, or None if it is not running
        now: Current local time
        poll_threshold: Ask to be polled again once this many seconds or fewer remain

    Returns:
        SessionStatus
    """
    if snapshot is None or not snapshot.running:
        return SessionStatus.inactive()

    keeps_display, total_seconds = parse_invocation_args(snapshot.invocation_args)
    allows_display_sleep = not keeps_display

    if total_seconds is None:
        return SessionStatus(
            active=True,
            indefinite=True,
            display_allows_display_sleep=allows_display_sleep
        )

    elapsed_seconds = max(0, int((now - snapshot.start_time).total_seconds()))
    remaining_seconds = max(0, total_seconds - elapsed_seconds)

    return SessionStatus(
        active=True,
        indefinite=False,
        display_allows_display_sleep=allows_display_sleep,
        remaining_seconds=remaining_seconds,
        should_poll_again=remaining_seconds <= poll_threshold,
        total_seconds=total_seconds,
        end_time=snapshot.start_time + timedelta(seconds=total_seconds)
    )


def describe(status: SessionStatus, use_24h: bool = False) -> Tuple[str, str]:
    """Get (title, subtitle) text for a session status"""
    if not status.active:
        return "Caffeinate deactivated", "Run a command to start caffeinate"

    if status.indefinite:
        note = display_sleep_note(status.display_allows_display_sleep)
        return "Caffeinate active indefinitely", f"Session running indefinitely{note}"

    end_text = format_clock(status.end_time, use_24h=use_24h)
    return (
        f"Caffeinate active until {end_text}",
        format_remaining(status.remaining_seconds, status.display_allows_display_sleep)
    )


class SessionInspector:
    """Reports on the keep-awake session; lookup failures count as inactive"""

    def __init__(self, process_query: ProcessQuery, poll_threshold: Optional[int] = None):
        self.process_query = process_query
        if poll_threshold is None:
            poll_threshold = config.poll_threshold_seconds
        self.poll_threshold = poll_threshold

    def _report(self, error: ProcessQueryError):
        if config.debug:
            ui.print_warning(f"Process query failed: {error}")

    def snapshot(self) -> Optional[ProcessSnapshot]:
        try:
            return self.process_query.query()
        except ProcessQueryError as e:
            self._report(e)
            return None

    def is_running(self) -> bool:
        try:
            return self.process_query.is_running()
        except ProcessQueryError as e:
            self._report(e)
            return False

    def inspect(self, now: datetime) -> SessionStatus:
        return derive_status(self.snapshot(), now, self.poll_threshold)

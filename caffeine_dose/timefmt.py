"""Clock arithmetic and text formatting shared by the parser and the session inspector"""

from datetime import datetime, time
from typing import Tuple, Union

MINUTES_PER_DAY = 1440


def convert_to_24h(hour: Union[int, str], marker: str) -> int:
    """
    Convert a 12-hour clock hour to 24-hour form

    Args:
        hour: Hour as int or digit string (leading zeros allowed)
        marker: AM/PM marker, any of 'a', 'p', 'am', 'pm' in any case

    Returns:
        Hour in 24-hour form
    """
    hour = int(str(hour).lstrip('0') or '0')
    marker = marker.lower()

    if marker.startswith('p') and hour < 12:
        return hour + 12
    if marker.startswith('a') and hour == 12:
        return 0
    return hour


def nearest_future(hour: int, minute: int, now_hour: int, now_minute: int) -> int:
    """
    Get minutes from now until an hour:minute typed without AM/PM

    Both the AM and PM reading of the hour are considered. PM wins when AM has
    already passed today but PM has not; otherwise a future AM reading wins,
    and failing that the AM reading is taken tomorrow.

    Returns:
        Minutes until the chosen occurrence, always greater than zero
    """
    now_total = now_hour * 60 + now_minute
    am_hour = 0 if hour == 12 else hour
    pm_hour = hour + 12 if hour < 12 else hour

    am_diff = am_hour * 60 + minute - now_total
    pm_diff = pm_hour * 60 + minute - now_total

    if am_diff < 0 and pm_diff > 0:
        return pm_diff
    if am_diff > 0:
        return am_diff
    return am_diff + MINUTES_PER_DAY


def add_minutes(hour: int, minute: int, minutes: int) -> Tuple[int, int]:
    """Get the wall-clock hour and minute a number of minutes after hour:minute"""
    total = hour * 60 + minute + minutes
    return (total // 60) % 24, total % 60


def format_clock(value: Union[datetime, time], include_seconds: bool = False, use_24h: bool = False) -> str:
    """Render a time of day as 'h:mm[:ss] AM/PM' or 'HH:mm[:ss]'"""
    if use_24h:
        text = f"{value.hour:02d}:{value.minute:02d}"
        if include_seconds:
            text += f":{value.second:02d}"
        return text

    hour = value.hour % 12 or 12
    text = f"{hour}:{value.minute:02d}"
    if include_seconds:
        text += f":{value.second:02d}"
    text += " AM" if value.hour < 12 else " PM"
    return text.lstrip()


def display_sleep_note(display_allows_sleep: bool) -> str:
    return " - Display can sleep" if display_allows_sleep else " - Display stays awake"


def format_remaining(seconds: int, display_allows_sleep: bool) -> str:
    """Render remaining session time such as '1h 5m left - Display can sleep'"""
    note = display_sleep_note(display_allows_sleep)

    if seconds < 60:
        return f"{seconds}s left{note}"

    if seconds < 3600:
        m, s = divmod(seconds, 60)
        seconds_part = f" {s}s" if s > 0 else ""
        return f"{m}m{seconds_part} left{note}"

    h = seconds // 3600
    m = (seconds % 3600) // 60
    minutes_part = f" {m}m" if m > 0 else ""
    return f"{h}h{minutes_part} left{note}"


def format_duration(total_minutes: int) -> str:
    """Render a duration in words, e.g. '1 hour 30 minutes'"""
    hours, minutes = divmod(total_minutes, 60)
    hours_text = "1 hour" if hours == 1 else f"{hours} hours"
    minutes_text = "1 minute" if minutes == 1 else f"{minutes} minutes"

    if hours > 0 and minutes > 0:
        return f"{hours_text} {minutes_text}"
    if hours > 0:
        return hours_text
    return minutes_text

"""Parse launcher queries into keep-awake instructions

Handles:
    ""          status summary
    "s"         session details
    "i"         keep awake indefinitely
    "d"         deactivate
    "45"        45 minutes
    "1 30"      1 hour 30 minutes
    "2h"        2 hours
    "8:"        until the next 8 o'clock
    "8:30"      until the next 8:30 (AM or PM, whichever comes first)
    "8:30pm"    until 20:30
    "8pm"       until 20:00
    "9ish"      until the next 9 o'clock
"""

import re
from typing import Callable, List, Optional, Tuple

from .models import Instruction
from .timefmt import add_minutes, convert_to_24h, nearest_future

_DIGITS = re.compile(r'[0-9]+')
_HOURS = re.compile(r'([0-9]+)h', re.IGNORECASE)
_AMPM_HOUR = re.compile(r'([0-9]{1,2})(am|pm|a|p)', re.IGNORECASE)
_CLOCK = re.compile(r'([0-9]{1,2}):([0-9]{1,2})(am|pm|a|p)?', re.IGNORECASE)
_LOOSE_HOUR = re.compile(r'([0-9]{1,2})[^0-9]+')

Rule = Tuple[Callable[[str], bool], Callable[[str, object], Instruction]]


def _has_ampm_marker(token: str) -> bool:
    t = token.lower()
    return t.endswith(('a', 'p', 'am', 'pm'))


def _in_future(hour: int, minute: int, now) -> Instruction:
    """Resolve an hour:minute typed without AM/PM to its nearest future occurrence"""
    offset = nearest_future(hour, minute, now.hour, now.minute)
    return Instruction.target(*add_minutes(now.hour, now.minute, offset))


def _parse_hours(token: str, now) -> Instruction:
    hours = int(_HOURS.fullmatch(token).group(1))
    if hours == 0:
        return Instruction.invalid()
    return Instruction.duration(hours * 60)


def _parse_clock(token: str, now) -> Instruction:
    """Parse a token containing ':' ("8:", "8:30", "8:30pm")"""
    hour_text, _, rest = token.partition(':')

    if rest == '':
        if not _DIGITS.fullmatch(hour_text) or len(hour_text) > 2:
            return Instruction.invalid()
        hour = int(hour_text)
        if hour > 23:
            return Instruction.invalid()
        return _in_future(hour, 0, now)

    m = _CLOCK.fullmatch(token)
    if not m:
        return Instruction.invalid()

    hour, minute, marker = int(m.group(1)), int(m.group(2)), m.group(3)
    if hour > 23 or minute > 59:
        return Instruction.invalid()

    if marker:
        return Instruction.target(convert_to_24h(m.group(1), marker), minute)
    return _in_future(hour, minute, now)


def _parse_ampm(token: str, now) -> Instruction:
    m = _AMPM_HOUR.fullmatch(token)
    if not m:
        return Instruction.invalid()

    hour = int(m.group(1))
    if not 1 <= hour <= 12:
        return Instruction.invalid()
    return Instruction.target(convert_to_24h(hour, m.group(2)), 0)


def _parse_loose_hour(token: str, now) -> Instruction:
    hour = int(_LOOSE_HOUR.fullmatch(token).group(1))
    if hour > 23:
        return Instruction.invalid()
    return Instruction.duration(nearest_future(hour, 0, now.hour, now.minute))


# Single-token grammar, first match wins
RULES: List[Rule] = [
    (lambda t: t == 's', lambda t, now: Instruction.status(explicit=True)),
    (lambda t: t == 'i', lambda t, now: Instruction.indefinite()),
    (lambda t: t == 'd', lambda t, now: Instruction.deactivate()),
    (lambda t: _DIGITS.fullmatch(t) is not None, lambda t, now: Instruction.duration(int(t))),
    (lambda t: _HOURS.fullmatch(t) is not None, _parse_hours),
    (lambda t: ':' in t, _parse_clock),
    (_has_ampm_marker, _parse_ampm),
    (lambda t: _LOOSE_HOUR.fullmatch(t) is not None, _parse_loose_hour),
]


def parse_token(token: str, now) -> Instruction:
    """Match a single token against the ordered grammar"""
    for matches, transform in RULES:
        if matches(token):
            return transform(token, now)
    return Instruction.invalid()


def parse(raw: Optional[str], now) -> Instruction:
    """
    Parse a raw launcher query

    Args:
        raw: Text typed by the user, untrimmed (None is treated as empty)
        now: Current wall-clock reading, anything with .hour and .minute

    Returns:
        Instruction; unrecognized input yields Instruction.invalid()
    """
    parts = (raw or '').split()

    if not parts:
        return Instruction.status(explicit=False)

    if len(parts) == 1:
        return parse_token(parts[0], now)

    if len(parts) == 2 and all(_DIGITS.fullmatch(p) for p in parts):
        hours, minutes = int(parts[0]), int(parts[1])
        return Instruction.duration(hours * 60 + minutes)

    return Instruction.invalid()

"""Alfred script filter responses for the keep-awake workflow"""

import json
from datetime import datetime, timedelta
from typing import Optional

from .config import config
from .models import Instruction
from .session import SessionInspector, describe
from .timefmt import format_clock, format_duration

# Seconds before Alfred re-runs the script filter
RERUN_INTERVAL = 1

_DISPLAY_SLEEP_MOD = {
    'subtitle': "⌘ Allow display sleep",
    'variables': {'display_sleep_allow': 'true'},
}


def instruction_arg(instruction: Instruction) -> str:
    """
    Get the argument passed on to the workflow's run script

    Returns:
        "0" for invalid input (including zero durations), "status",
        "indefinite", "deactivate", "TIME:HH:MM" or a number of minutes
    """
    if instruction.kind == 'duration':
        return str(instruction.minutes) if instruction.minutes > 0 else "0"
    if instruction.kind == 'target':
        return f"TIME:{instruction.hour:02d}:{instruction.minute:02d}"
    if instruction.kind == 'invalid':
        return "0"
    return instruction.kind


def create_response(
    title: str,
    subtitle: str,
    arg: str,
    rerun: bool = False,
    allow_mods: bool = False,
    valid: bool = True,
    icon_path: Optional[str] = None
) -> str:
    """Build a single-item script filter response as JSON"""
    item = {
        'title': title,
        'subtitle': subtitle,
        'arg': arg,
        'icon': {'path': icon_path or config.icon_path},
        'valid': valid,
    }

    if allow_mods:
        item['mods'] = {'cmd': dict(_DISPLAY_SLEEP_MOD, arg=arg)}

    response = {'items': [item]}
    if rerun:
        response['rerun'] = RERUN_INTERVAL

    return json.dumps(response, ensure_ascii=False)


def render_filter(
    instruction: Instruction,
    inspector: SessionInspector,
    now: datetime,
    use_24h: bool = False,
    icon_path: Optional[str] = None
) -> str:
    """
    Render the script filter response for a parsed query

    The session is only inspected for status queries and deactivation.

    Args:
        instruction: Parsed query
        inspector: Session inspector used for status lookups
        now: Current local time
        use_24h: Render clock times in 24-hour form

    Returns:
        JSON string
    """
    arg = instruction_arg(instruction)

    if arg == "0":
        return create_response(
            "Invalid input", "Please provide a valid time format", arg,
            icon_path=icon_path
        )

    if instruction.kind == 'indefinite':
        return create_response(
            "Active indefinitely", "Keep your Mac awake until manually disabled", arg,
            allow_mods=True, icon_path=icon_path
        )

    if instruction.kind == 'deactivate':
        if inspector.inspect(now).active:
            return create_response(
                "Deactivate caffeinate", "Stop keeping your Mac awake", arg,
                allow_mods=True, icon_path=icon_path
            )
        return create_response(
            "Caffeinate already deactivated", "No active session to stop", arg,
            valid=False, icon_path=icon_path
        )

    if instruction.kind == 'status':
        status = inspector.inspect(now)
        title, subtitle = describe(status, use_24h)

        if not instruction.explicit:
            if status.active:
                subtitle = "Define a new time or press 's' for details"
            else:
                title = "Caffeine Dose"
                subtitle = "Caffeinate deactivated • Set a time to keep your Mac awake"
            return create_response(title, subtitle, arg, valid=False, icon_path=icon_path)

        return create_response(
            title, subtitle, arg,
            rerun=status.should_poll_again, icon_path=icon_path
        )

    if instruction.kind == 'target':
        end_text = format_clock(instruction.resolve(now), use_24h=use_24h)
        return create_response(
            f"Active until {end_text}", "Keep awake until specified time", arg,
            allow_mods=True, icon_path=icon_path
        )

    # Duration: end time moves with the clock, so keep refreshing it
    end = now + timedelta(minutes=instruction.minutes)
    return create_response(
        f"Active for {format_duration(instruction.minutes)}",
        f"Keep awake until around {format_clock(end, include_seconds=True, use_24h=use_24h)}",
        arg,
        rerun=True, allow_mods=True, icon_path=icon_path
    )


def render_toggle(running: bool, icon_path: Optional[str] = None) -> str:
    """Render the on/off toggle response"""
    if running:
        return create_response("Turn Off", "Allow computer to sleep", "off", icon_path=icon_path)
    return create_response(
        "Turn On", "Prevent sleep indefinitely", "on",
        allow_mods=True, icon_path=icon_path
    )

"""Rich UI components for terminal interface"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from .models import SessionStatus
from .timefmt import format_clock


console = Console()
# Messages go to stderr so launcher JSON on stdout stays intact
err_console = Console(stderr=True)


def print_error(message: str):
    """Print error message"""
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str):
    """Print warning message"""
    err_console.print(f"[yellow]⚠[/yellow] {message}")


def create_status_panel(status: SessionStatus, use_24h: bool = False) -> Panel:
    """Create session status panel"""
    from .session import describe

    title, subtitle = describe(status, use_24h)

    if not status.active:
        lines = [
            f"[dim]{title}[/dim]",
            "",
            "[dim]Set a time to keep your Mac awake[/dim]"
        ]
        return Panel("\n".join(lines), box=box.ROUNDED, border_style="dim", title="Caffeine Dose", title_align="left")

    lines = [f"[bold cyan]{title}[/bold cyan]", ""]

    if status.timed:
        total = status.total_seconds
        remaining = status.remaining_seconds
        progress_pct = min(100, ((total - remaining) / total) * 100) if total > 0 else 100

        bar_width = 40
        filled = int((progress_pct / 100) * bar_width)
        bar = "█" * filled + "░" * (bar_width - filled)

        lines.append(f"[cyan]{bar}[/cyan]")
        lines.append(subtitle)
        if status.should_poll_again:
            lines.append("")
            lines.append("[yellow]⏰ Less than an hour left[/yellow]")
    else:
        lines.append(subtitle)

    return Panel(
        "\n".join(lines),
        box=box.DOUBLE,
        border_style="cyan",
        title="Caffeine Dose",
        title_align="left"
    )


def display_status(status: SessionStatus, use_24h: bool = False):
    """Display the current session status"""
    console.print(create_status_panel(status, use_24h))


def display_config(cfg):
    """Display current configuration"""
    from datetime import datetime

    table = Table(title="Configuration", show_header=True, box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Time format", "24-hour" if cfg.use_24h else "12-hour")
    table.add_row("Example", format_clock(datetime.now(), use_24h=cfg.use_24h))
    table.add_row("Process name", cfg.process_name)
    table.add_row("Query timeout", f"{cfg.process_query_timeout}s")
    table.add_row("Icon path", cfg.icon_path)
    table.add_row("Debug", "on" if cfg.debug else "off")

    console.print(table)

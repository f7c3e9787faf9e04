#!/usr/bin/env python3
"""Caffeine Dose - Main CLI Entry Point"""

import sys
import argparse
from datetime import datetime

from caffeine_dose.config import config
from caffeine_dose.parser import parse
from caffeine_dose.process_query import PsProcessQuery
from caffeine_dose.session import SessionInspector
from caffeine_dose import alfred
from caffeine_dose import ui


class CaffeineCLI:
    """Main CLI application"""

    def __init__(self, inspector=None, out=None):
        self.inspector = inspector or SessionInspector(PsProcessQuery())
        self.out = out or sys.stdout

    def run(self, args):
        """Main entry point"""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if not hasattr(parsed_args, 'func'):
            parser.print_help()
            return

        parsed_args.func(parsed_args)

    def create_parser(self):
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            description='Caffeine Dose - keep your Mac awake from the launcher',
            prog='caffeine'
        )

        subparsers = parser.add_subparsers(title='commands', dest='command')

        filter_parser = subparsers.add_parser('filter', help='Script filter for a time query')
        filter_parser.add_argument('query', nargs='*', help='Duration or time, e.g. 45, 1 30, 2h, 8:30pm')
        filter_parser.set_defaults(func=self.cmd_filter)

        toggle_parser = subparsers.add_parser('toggle', help='Script filter for the on/off toggle')
        toggle_parser.set_defaults(func=self.cmd_toggle)

        status_parser = subparsers.add_parser('status', help='Show the current session')
        status_parser.set_defaults(func=self.cmd_status)

        config_parser = subparsers.add_parser('config', help='Show configuration')
        config_parser.set_defaults(func=self.cmd_config)

        return parser

    def _write(self, text):
        self.out.write(text + "\n")

    def cmd_filter(self, args):
        """Print the script filter response for a query"""
        now = datetime.now()
        instruction = parse(" ".join(args.query), now)
        self._write(alfred.render_filter(instruction, self.inspector, now, use_24h=config.use_24h))

    def cmd_toggle(self, args):
        """Print the toggle response"""
        self._write(alfred.render_toggle(self.inspector.is_running()))

    def cmd_status(self, args):
        """Show the current session in the terminal"""
        status = self.inspector.inspect(datetime.now())
        ui.display_status(status, use_24h=config.use_24h)

    def cmd_config(self, args):
        """Show current configuration"""
        ui.display_config(config)


def main():
    """Main entry point"""
    try:
        cli = CaffeineCLI()
        cli.run(sys.argv[1:])
    except KeyboardInterrupt:
        ui.err_console.print("\n[dim]Interrupted[/dim]")
        sys.exit(0)
    except Exception as e:
        ui.print_error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()

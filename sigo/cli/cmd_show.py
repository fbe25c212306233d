"""
sigo show command implementation.
"""

import sys
import json
import argparse

from sigo.core.exceptions import SigoError
from sigo.lifecycle import get_task
from sigo.cli.cmd_list import format_table


def cmd_show(cli_instance, args: argparse.Namespace) -> int:
    """Show a single task found in any store.

    Args:
        cli_instance: SigoCLI instance with cfg
        args: Parsed command-line arguments with: id, json (optional)

    Returns:
        Exit code (0 on success, 1 if not found or on error)
    """
    try:
        task = get_task(cli_instance.cfg, args.id)

        if task is None:
            print(f"Error: Task not found: #{args.id}", file=sys.stderr)
            return 1

        if getattr(args, "json", False):
            print(json.dumps(task.to_dict(), indent=2))
        else:
            print(format_table([task]))
        return 0

    except SigoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

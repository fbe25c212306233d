"""
sigo add command implementation.

Creates a Ready task with a freshly issued id.
"""

import sys
import argparse

from sigo.core.exceptions import SigoError
from sigo.lifecycle import create_task


def cmd_add(cli_instance, args: argparse.Namespace) -> int:
    """Add a new task.

    Args:
        cli_instance: SigoCLI instance with cfg
        args: Parsed command-line arguments with: description (list of words)

    Returns:
        Exit code (0 on success, 1 on error)
    """
    try:
        description = " ".join(args.description).strip()
        if not description:
            print("Error: Task description cannot be empty", file=sys.stderr)
            return 1

        task = create_task(cli_instance.cfg, description)
        print(f"Task added: #{task.id} {task.description}")
        return 0

    except SigoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

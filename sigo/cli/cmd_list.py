"""
sigo list command implementation.

Displays tasks as a table grouped by state, or as JSON.
"""

import sys
import json
import argparse
from typing import List

from sigo.core.exceptions import SigoError
from sigo.core.models import Task, TaskState
from sigo.lifecycle import list_tasks

HEADERS = ("ID", "STATE", "DESCRIPTION")


def format_table(tasks: List[Task]) -> str:
    """Render tasks as a left-aligned text table."""
    rows = [(str(t.id), t.state.value, t.description) for t in tasks]
    id_width = max([len(HEADERS[0])] + [len(r[0]) for r in rows])
    state_width = max([len(HEADERS[1])] + [len(r[1]) for r in rows])

    lines = []
    for task_id, state, description in [HEADERS] + rows:
        lines.append(
            f"{task_id.rjust(id_width)}  {state.ljust(state_width)}  {description}".rstrip()
        )
    return "\n".join(lines)


def cmd_list(cli_instance, args: argparse.Namespace) -> int:
    """List tasks.

    Args:
        cli_instance: SigoCLI instance with cfg
        args: Parsed command-line arguments with: state (optional), json (optional)

    Returns:
        Exit code (0 on success, 1 on error)
    """
    try:
        state = TaskState(args.state) if getattr(args, "state", None) else None
        tasks = list_tasks(cli_instance.cfg, state)

        if getattr(args, "json", False):
            print(json.dumps([t.to_dict() for t in tasks], indent=2))
            return 0

        if not tasks:
            print("No tasks found.")
            return 0

        print(format_table(tasks))
        return 0

    except SigoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

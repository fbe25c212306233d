"""
sigo transitions command implementations.

Handles state transitions: wait, back, done.
"""

import sys
import argparse
from typing import Callable

from sigo.config import SigoConfig
from sigo.core.exceptions import SigoError
from sigo.core.models import Task
from sigo.lifecycle import back, complete, get_task, wait


def _run_transition(
    cli_instance,
    task_id: int,
    transition: Callable[[SigoConfig, Task], Task],
    verb: str,
) -> int:
    try:
        task = get_task(cli_instance.cfg, task_id)

        if task is None:
            print(f"Error: Task not found: #{task_id}", file=sys.stderr)
            return 1

        moved = transition(cli_instance.cfg, task)
        print(f"Task #{moved.id} {verb}: {moved.description}")
        return 0

    except SigoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_wait(cli_instance, args: argparse.Namespace) -> int:
    """Move a task to Waiting.

    Transition: ready -> waiting

    Args:
        cli_instance: SigoCLI instance with cfg
        args: Parsed command-line arguments with: id

    Returns:
        Exit code (0 on success, 1 on error)
    """
    return _run_transition(cli_instance, args.id, wait, "is waiting")


def cmd_back(cli_instance, args: argparse.Namespace) -> int:
    """Move a waiting task back to Ready.

    Transition: waiting -> ready

    Args:
        cli_instance: SigoCLI instance with cfg
        args: Parsed command-line arguments with: id

    Returns:
        Exit code (0 on success, 1 on error)
    """
    return _run_transition(cli_instance, args.id, back, "is ready")


def cmd_done(cli_instance, args: argparse.Namespace) -> int:
    """Complete a task.

    Transition: ready|waiting -> completed

    Args:
        cli_instance: SigoCLI instance with cfg
        args: Parsed command-line arguments with: id

    Returns:
        Exit code (0 on success, 1 on error)
    """
    return _run_transition(cli_instance, args.id, complete, "completed")

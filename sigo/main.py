#!/usr/bin/env python3
"""
sigo: Personal task tracker CLI.

Commands:
  init     Write a config file and create empty task stores
  add      Add a new task (ready)
  list     List tasks grouped by state
  show     Show a single task
  wait     Move a task to waiting (ready -> waiting)
  back     Move a task back to ready (waiting -> ready)
  done     Complete a task (ready/waiting -> completed)
"""

import argparse
import sys
import logging
from typing import List, Optional

from sigo.cli import SigoCLI
from sigo.config import load_config
from sigo.core.exceptions import ConfigError
from sigo.core.models import TaskState

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _task_id(value: str) -> int:
    """argparse type for task ids."""
    try:
        task_id = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {value!r}")
    if task_id < 1:
        raise argparse.ArgumentTypeError(f"task id must be positive: {value!r}")
    return task_id


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sigo",
        description="Personal task tracker with ready, waiting, and completed tasks",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config file (default: $SIGO_CONFIG or ~/.config/sigo/config.yaml)",
    )
    parser.add_argument(
        "--home",
        default=None,
        help="Directory holding task stores (overrides config and $SIGO_HOME)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log operations to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # 'init' command
    init_parser = subparsers.add_parser(
        "init", help="Write a config file and create empty task stores"
    )
    init_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing config file"
    )
    init_parser.add_argument(
        "--home",
        dest="init_home",
        default=None,
        help="Task home to record in the new config file",
    )

    # 'add' command
    add_parser = subparsers.add_parser("add", help="Add a new ready task")
    add_parser.add_argument("description", nargs="+", help="Task description")

    # 'list' command
    list_parser = subparsers.add_parser("list", help="List tasks grouped by state")
    list_parser.add_argument(
        "--state",
        choices=[state.value for state in TaskState],
        help="Only list tasks in this state",
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # 'show' command
    show_parser = subparsers.add_parser("show", help="Show a single task")
    show_parser.add_argument("id", type=_task_id, help="Task ID")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # 'wait' command
    wait_parser = subparsers.add_parser(
        "wait", help="Move a task to waiting (ready -> waiting)"
    )
    wait_parser.add_argument("id", type=_task_id, help="Task ID")

    # 'back' command
    back_parser = subparsers.add_parser(
        "back", help="Move a task back to ready (waiting -> ready)"
    )
    back_parser.add_argument("id", type=_task_id, help="Task ID")

    # 'done' command
    done_parser = subparsers.add_parser(
        "done", help="Complete a task (ready/waiting -> completed)"
    )
    done_parser.add_argument("id", type=_task_id, help="Task ID")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        cfg = load_config(args.config, home_override=args.home)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    cli = SigoCLI(cfg, config_path=args.config)

    commands = {
        "init": cli.cmd_init,
        "add": cli.cmd_add,
        "list": cli.cmd_list,
        "show": cli.cmd_show,
        "wait": cli.cmd_wait,
        "back": cli.cmd_back,
        "done": cli.cmd_done,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())

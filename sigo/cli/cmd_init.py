"""
sigo init command implementation.

Writes a starter config file and creates the home directory with empty stores.
"""

import sys
import argparse
from pathlib import Path

from sigo.config import SigoConfig, resolve_config_path, write_default_config
from sigo.core.exceptions import SigoError
from sigo.core.models import TaskState
from sigo.store.repository import store_for


def cmd_init(cli_instance, args: argparse.Namespace) -> int:
    """Initialize configuration and stores.

    Args:
        cli_instance: SigoCLI instance with cfg and config_path
        args: Parsed command-line arguments with: force, init_home (optional)

    Returns:
        Exit code (0 on success, 1 on error)
    """
    try:
        config_path = resolve_config_path(cli_instance.config_path)
        cfg = cli_instance.cfg
        init_home = getattr(args, "init_home", None)
        if init_home:
            cfg = SigoConfig.for_home(Path(init_home).expanduser().resolve(), lock=cfg.lock)
        home = cfg.home

        if config_path.exists() and not getattr(args, "force", False):
            print(
                f"Error: Config file already exists: {config_path} (use --force to overwrite)",
                file=sys.stderr,
            )
            return 1

        write_default_config(config_path, home)

        for state in TaskState:
            # Reading creates a missing store file holding an empty list
            store_for(state).read_tasks(cfg)

        print(f"Config written: {config_path}")
        print(f"Task home: {home}")
        return 0

    except SigoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

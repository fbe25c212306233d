"""
sigo CLI command implementations.

This package contains individual command handlers for the sigo CLI.
Commands are organized into separate modules for maintainability.

Public API:
- SigoCLI: Facade holding the configuration and dispatching to command modules
"""

import argparse
from typing import Optional

# Import command modules (not functions) to avoid namespace conflicts
from sigo.cli import cmd_add as _cmd_add_module
from sigo.cli import cmd_init as _cmd_init_module
from sigo.cli import cmd_list as _cmd_list_module
from sigo.cli import cmd_show as _cmd_show_module
from sigo.cli import cmd_transitions as _cmd_transitions_module
from sigo.config import SigoConfig


class SigoCLI:
    """Task tracker CLI interface.

    Attributes:
        cfg: Configuration passed to every store operation
        config_path: Config file the configuration was loaded from, if any
    """

    def __init__(self, cfg: SigoConfig, config_path: Optional[str] = None):
        self.cfg = cfg
        self.config_path = config_path

    def cmd_init(self, args: argparse.Namespace) -> int:
        """Write config and create empty stores (delegates to cmd_init module)."""
        return _cmd_init_module.cmd_init(self, args)

    def cmd_add(self, args: argparse.Namespace) -> int:
        """Add a new Ready task (delegates to cmd_add module)."""
        return _cmd_add_module.cmd_add(self, args)

    def cmd_list(self, args: argparse.Namespace) -> int:
        """List tasks (delegates to cmd_list module)."""
        return _cmd_list_module.cmd_list(self, args)

    def cmd_show(self, args: argparse.Namespace) -> int:
        """Show one task (delegates to cmd_show module)."""
        return _cmd_show_module.cmd_show(self, args)

    def cmd_wait(self, args: argparse.Namespace) -> int:
        """Move a task to Waiting (delegates to cmd_transitions module)."""
        return _cmd_transitions_module.cmd_wait(self, args)

    def cmd_back(self, args: argparse.Namespace) -> int:
        """Move a task back to Ready (delegates to cmd_transitions module)."""
        return _cmd_transitions_module.cmd_back(self, args)

    def cmd_done(self, args: argparse.Namespace) -> int:
        """Complete a task (delegates to cmd_transitions module)."""
        return _cmd_transitions_module.cmd_done(self, args)


__all__ = [
    "SigoCLI",
]

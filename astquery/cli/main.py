"""
Main CLI entry point for astquery.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import click
import importlib
from typing import Dict

_COMMANDS: Dict[str, str] = {
    "find": "astquery.cli.find_cli:find",
    "run": "astquery.cli.run_cli:run",
}


def _load_click_command(import_path: str) -> click.Command:
    module_path, obj_name = import_path.split(":", 1)
    mod = importlib.import_module(module_path)
    return getattr(mod, obj_name)


class LazyGroup(click.Group):
    """Click group that imports subcommands on demand."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        target = _COMMANDS.get(cmd_name)
        if not target:
            return None
        return _load_click_command(target)


@click.group(cls=LazyGroup)
@click.version_option(package_name="astquery")
def cli() -> None:
    """astquery - find classes, methods and member accesses in Python code."""


if __name__ == "__main__":
    cli()

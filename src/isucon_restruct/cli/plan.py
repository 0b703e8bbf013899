from collections.abc import Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from isucon_restruct.cli.options import (
    MarkerOption,
    PathOption,
    VerboseOption,
    build_config,
    configure_logging,
    err_console,
)
from isucon_restruct.config import RestructureConfig
from isucon_restruct.core.restructure import entry_file_path, plan_restructure, source_dir
from isucon_restruct.errors import RestructError
from isucon_restruct.fs import LocalFileSystem
from isucon_restruct.models import EntryModule, LibModule, Module

console = Console()


def _line_count(content: str) -> str:
    lines = len(content.splitlines())
    return f"[dim]({lines} line{'' if lines == 1 else 's'})[/dim]"


def _add_modules(tree: Tree, modules: Sequence[Module], config: RestructureConfig) -> None:
    for module in modules:
        match module:
            case EntryModule(content=content):
                tree.add(f"[bold]{config.entry_file_name}[/bold] {_line_count(content)}")
            case LibModule(name=name, content=content, children=children):
                if children:
                    _add_modules(tree.add(f"[blue]{name}/[/blue]"), children, config)
                tree.add(f"{config.file_name(name)} {_line_count(content)}")


def plan(
    path: PathOption,
    marker: MarkerOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show the files a restructure would write, without writing anything."""
    configure_logging(verbose)
    config = build_config(marker)

    try:
        modules = plan_restructure(LocalFileSystem(), path, config)
    except (RestructError, OSError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if modules is None:
        err_console.print(f"{escape(str(entry_file_path(path, config)))} does not exist")
        return

    tree = Tree(f"[bold]{escape(str(source_dir(path, config)))}[/bold]")
    _add_modules(tree, modules, config)
    console.print(tree)

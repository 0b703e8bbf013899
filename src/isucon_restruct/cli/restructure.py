import typer
from rich.markup import escape

from isucon_restruct.cli.options import (
    MarkerOption,
    OptionalPathOption,
    VerboseOption,
    build_config,
    configure_logging,
    err_console,
)
from isucon_restruct.core.restructure import entry_file_path, run_restructure
from isucon_restruct.errors import RestructError
from isucon_restruct.fs import LocalFileSystem


def restructure(
    ctx: typer.Context,
    path: OptionalPathOption = None,
    marker: MarkerOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Split src/main.rs into resources, functions, models, consts and common modules."""
    if ctx.invoked_subcommand is not None:
        return
    if path is None:
        raise typer.BadParameter("Missing option.", param_hint="'--path' / '-p'")

    configure_logging(verbose)
    config = build_config(marker)

    try:
        modules = run_restructure(LocalFileSystem(), path, config)
    except (RestructError, OSError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if modules is None:
        err_console.print(f"{escape(str(entry_file_path(path, config)))} does not exist")

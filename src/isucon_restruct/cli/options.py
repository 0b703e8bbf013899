import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from isucon_restruct.config import DEFAULT_API_MARKERS, RestructureConfig

err_console = Console(stderr=True)

_PATH_HELP = "Project root directory containing src/main.rs."

PathOption = Annotated[Path, typer.Option("--path", "-p", help=_PATH_HELP)]
OptionalPathOption = Annotated[Path | None, typer.Option("--path", "-p", help=_PATH_HELP)]
MarkerOption = Annotated[
    list[str] | None,
    typer.Option(
        "--marker",
        "-m",
        help=f"Substring marking a function as an API resource; repeatable. Default: {', '.join(DEFAULT_API_MARKERS)}.",
    ),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")]


def build_config(markers: list[str] | None) -> RestructureConfig:
    if markers:
        return RestructureConfig(api_markers=tuple(markers))
    return RestructureConfig()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

import typer

from isucon_restruct.cli.plan import plan
from isucon_restruct.cli.restructure import restructure

app = typer.Typer(
    name="isucon-restruct",
    help="Split a monolithic src/main.rs into a tree of smaller modules.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.callback(invoke_without_command=True)(restructure)
app.command("plan")(plan)


def main() -> None:
    app()

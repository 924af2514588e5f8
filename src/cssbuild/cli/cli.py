"""CLI application for building CSS selectors."""

import typer

from cssbuild.cli.commands.selectors import app as selector_app

app = typer.Typer(
    help="cssbuild - CSS selector builder",
    no_args_is_help=True,
)

app.add_typer(selector_app, name="selector", help="Build / combine CSS selectors.")


if __name__ == "__main__":
    app()

"""Common CLI options for the CLI."""

import typer

PlainOpt = typer.Option(
    False,
    "--plain",
    help="Print only the selector text (also enabled by CSSBUILD_PLAIN=1)",
)

ElementOpt = typer.Option(
    None,
    "--element",
    "-e",
    help="Type selector (tag name), e.g. div",
)

IdOpt = typer.Option(
    None,
    "--id",
    "-i",
    help="Id selector without '#'",
)

ClassOpt = typer.Option(
    [],
    "--class",
    "-c",
    help="Class selector without '.'. This is reusable.",
    show_default=False,
)

AttrOpt = typer.Option(
    [],
    "--attr",
    "-a",
    help="Attribute selector body without brackets, e.g. 'href$=\".png\"'. This is reusable.",
    show_default=False,
)

PseudoClassOpt = typer.Option(
    [],
    "--pseudo-class",
    "-p",
    help="Pseudo-class without ':', e.g. 'nth-of-type(even)'. This is reusable.",
    show_default=False,
)

PseudoElementOpt = typer.Option(
    None,
    "--pseudo-element",
    help="Pseudo-element without '::', e.g. before",
)

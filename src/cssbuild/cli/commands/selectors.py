"""Commands for building CSS selectors."""

import typer

from cssbuild.cli.common.context import SelectorAppContext, build_selector_context
from cssbuild.cli.common.exits import die, ok_exit
from cssbuild.cli.common.options import (
    AttrOpt,
    ClassOpt,
    ElementOpt,
    IdOpt,
    PlainOpt,
    PseudoClassOpt,
    PseudoElementOpt,
)
from cssbuild.cli.common.output import out
from cssbuild.cli.common.selector_builder import (
    build_selector,
    combine_selectors,
    fragment_rows,
)
from cssbuild.cli.tui import prompt_selector

app = typer.Typer(
    help="Build CSS selectors",
    no_args_is_help=False,
    invoke_without_command=True,
)


@app.callback()
def _init(ctx: typer.Context, plain: bool = PlainOpt):
    """Initialize selector context."""
    ctx.obj = build_selector_context(plain)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def build(
    ctx: typer.Context,
    element: str | None = ElementOpt,
    id: str | None = IdOpt,
    cls: list[str] = ClassOpt,
    attr: list[str] = AttrOpt,
    pseudo_class: list[str] = PseudoClassOpt,
    pseudo_element: str | None = PseudoElementOpt,
    explain: bool = typer.Option(
        False, "--explain", help="Show the fragments next to the selector"
    ),
):
    """
    Build a compound selector from fragments.
    """
    appctx: SelectorAppContext = ctx.obj

    try:
        selector = build_selector(
            element=element,
            id=id,
            classes=cls,
            attrs=attr,
            pseudo_classes=pseudo_class,
            pseudo_element=pseudo_element,
        )
    except ValueError as e:
        die(str(e), code=1)

    if explain and not appctx.plain:
        out.fragments_table(fragment_rows(selector))

    out.selector(selector.stringify(), plain=appctx.plain)


@app.command()
def combine(
    ctx: typer.Context,
    parts: list[str] = typer.Argument(
        ...,
        help="OPERAND COMBINATOR OPERAND [COMBINATOR OPERAND]...",
        show_default=False,
    ),
):
    """
    Join rendered selectors with combinators (' ', '>', '+', '~').
    """
    appctx: SelectorAppContext = ctx.obj

    try:
        selector = combine_selectors(parts, appctx.builder)
    except ValueError as e:
        die(str(e), code=1)

    out.selector(selector.stringify(), plain=appctx.plain)


@app.command()
def wizard(ctx: typer.Context):
    """
    Build a compound selector interactively.
    """
    appctx: SelectorAppContext = ctx.obj

    if not appctx.plain:
        out.header("Answer each question in order; leave empty to skip")
    selector = prompt_selector()
    text = selector.stringify()

    if not text:
        ok_exit("Nothing selected")

    if not appctx.plain:
        out.fragments_table(fragment_rows(selector))
    out.selector(text, plain=appctx.plain)

import pytest
from typer.testing import CliRunner

from cssbuild.cli.cli import app
from cssbuild.cli.common.context import PLAIN_ENV, build_selector_context
from cssbuild.cli.common.output import Out

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_plain_env(monkeypatch):
    monkeypatch.delenv(PLAIN_ENV, raising=False)


def test_build_plain_prints_only_selector():
    result = runner.invoke(
        app,
        [
            "selector",
            "--plain",
            "build",
            "--pseudo-class",
            "focus",
            "--attr",
            'href$=".png"',
            "--element",
            "a",
        ],
    )

    assert result.exit_code == 0
    assert result.output == 'a[href$=".png"]:focus\n'


def test_build_rich_output_contains_selector_and_fragments():
    result = runner.invoke(
        app,
        ["selector", "build", "--id", "main", "-c", "container", "--explain"],
    )

    assert result.exit_code == 0
    assert "#main.container" in result.output
    assert "Fragments" in result.output


def test_build_without_fragments_fails():
    result = runner.invoke(app, ["selector", "build"])

    assert result.exit_code == 1
    assert "At least one fragment" in result.output


def test_combine_plain():
    result = runner.invoke(
        app, ["selector", "--plain", "combine", "div#main", "+", "table", "~", "tr"]
    )

    assert result.exit_code == 0
    assert result.output == "div#main + table ~ tr\n"


def test_combine_rejects_even_argument_count():
    result = runner.invoke(app, ["selector", "combine", "a", ">"])

    assert result.exit_code == 1
    assert "OPERAND COMBINATOR OPERAND" in result.output


def test_plain_env_enables_plain_output(monkeypatch):
    monkeypatch.setenv(PLAIN_ENV, "yes")

    result = runner.invoke(app, ["selector", "build", "-e", "ul", "--explain"])

    assert result.exit_code == 0
    assert result.output == "ul\n"


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("0", False), ("", False)])
def test_build_selector_context_reads_env(monkeypatch, raw: str, expected: bool):
    monkeypatch.setenv(PLAIN_ENV, raw)

    assert build_selector_context().plain is expected
    assert build_selector_context(plain=True).plain is True


def test_wizard_builds_selector_from_answers(monkeypatch):
    answers = iter(
        ["a", None, "btn", "primary", None, 'href$=".png"', None, "focus", None, None]
    )
    monkeypatch.setattr(Out, "ask_text", lambda self, message, **kwargs: next(answers))

    result = runner.invoke(app, ["selector", "--plain", "wizard"])

    assert result.exit_code == 0
    assert result.output.splitlines()[-1] == 'a.btn.primary[href$=".png"]:focus'


def test_wizard_with_no_answers_exits_cleanly(monkeypatch):
    monkeypatch.setattr(Out, "ask_text", lambda self, message, **kwargs: None)

    result = runner.invoke(app, ["selector", "wizard"])

    assert result.exit_code == 0
    assert "Nothing selected" in result.output

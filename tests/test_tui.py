from cssbuild.cli.common.output import Out
from cssbuild.cli.tui import prompt_selector


def _script(monkeypatch, answers):
    it = iter(answers)
    asked: list[str] = []

    def fake(self, message, **kwargs):
        asked.append(message)
        return next(it)

    monkeypatch.setattr(Out, "ask_text", fake)
    return asked


def test_prompt_selector_asks_stages_in_order(monkeypatch):
    asked = _script(monkeypatch, ["div", "main", None, None, None, "before"])

    selector = prompt_selector()

    assert selector.stringify() == "div#main::before"
    assert [m.split("?")[0] for m in asked] == [
        "Element",
        "Id",
        "Class",
        "Attribute",
        "Pseudo-class",
        "Pseudo-element",
    ]


def test_ask_many_collects_until_empty(monkeypatch):
    _script(monkeypatch, ["one", "two", None])

    assert Out().ask_many("Class?") == ["one", "two"]

"""Questionary / prompt_toolkit theme for cssbuild.

Questionary uses prompt_toolkit under the hood. This module defines the central style used by every
interactive prompt.
"""

from __future__ import annotations

from prompt_toolkit.styles import Style

QUESTIONARY_STYLE_TEXT = Style.from_dict(
    {
        "qmark": "bold ansibrightcyan",
        "question": "bold ansibrightcyan",
        "answer": "bold ansibrightyellow",
        "instruction": "ansibrightblack",
        "error": "bold ansired",
    }
)
"""Application context management for the CLI."""

import os
from dataclasses import dataclass

from cssbuild.core.builder import CssSelectorBuilder, css_selector_builder

PLAIN_ENV = "CSSBUILD_PLAIN"


@dataclass
class SelectorAppContext:
    """Application context holding the selector facade and output settings."""

    plain: bool
    builder: CssSelectorBuilder


def _plain_from_env() -> bool:
    """Return True if plain output is enabled through the environment."""
    raw = os.getenv(PLAIN_ENV, "").strip().lower()
    return raw in {"1", "true", "yes"}


def build_selector_context(plain: bool = False) -> SelectorAppContext:
    """Build and return the application context for selector commands.

    Args:
        plain: Plain output requested on the command line. The environment
            variable can only enable plain mode, never disable it.

    Returns:
        SelectorAppContext: Context with the shared facade and output mode.
    """
    return SelectorAppContext(
        plain=plain or _plain_from_env(),
        builder=css_selector_builder,
    )

"""Formatting configuration for classification and rendering.

Pure configuration data. DEFAULT_CONFIG reproduces the canonical report
layout; pass another FormatConfig via the keyword-only config= argument of
E(), T(), Template.E(), Template.T(), classify() or render().
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class FormatConfig:
    """How details are stringified and how cause chains are laid out.

    detail_formatter turns a non-text detail value into text. The default
    is str(), so objects control their own rendering via __str__.
    """

    detail_formatter: Callable[[object], str] = str
    detail_separator: str = "; "
    block_prefix: str = " - "   # before every block of a rendered chain
    indent: str = "   "         # continuation line under the header

    def __post_init__(self) -> None:
        if not self.detail_separator:
            raise ValueError("detail_separator must be non-empty")


DEFAULT_CONFIG: FormatConfig = FormatConfig()

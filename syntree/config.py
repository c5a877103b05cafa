"""Render options and the module-wide defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .layout import LayoutOptions


@dataclass
class RenderOptions:
    font_size: int = 12
    term_font: str = "DejaVuSans.ttf"
    nonterm_font: str = "DejaVuSans-Bold.ttf"
    vertical_spacing: float = 40
    horizontal_spacing: float = 10
    margin: float = 15  # pixels between the tree and each canvas edge
    padding_above_text: float = 6  # lines stop this far above text
    padding_below_text: float = 6
    term_lines: bool = False  # draw a line to a sole terminal child
    color: bool = True

    def validate(self) -> "RenderOptions":
        if self.font_size <= 0:
            raise ValueError(f"font size must be positive, got {self.font_size}")
        for name in (
            "vertical_spacing",
            "horizontal_spacing",
            "margin",
            "padding_above_text",
            "padding_below_text",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name.replace('_', ' ')} must be non-negative, got {value}")
        return self

    def layout_options(self) -> LayoutOptions:
        return LayoutOptions(
            font_size=self.font_size,
            vertical_spacing=self.vertical_spacing,
            horizontal_spacing=self.horizontal_spacing,
            padding_above_text=self.padding_above_text,
            padding_below_text=self.padding_below_text,
            term_lines=self.term_lines,
        )


_RENDER_OPTIONS = RenderOptions()


def get_render_options() -> RenderOptions:
    return copy.deepcopy(_RENDER_OPTIONS)


def set_render_options(options: RenderOptions) -> None:
    global _RENDER_OPTIONS
    _RENDER_OPTIONS = copy.deepcopy(options.validate())

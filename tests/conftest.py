import pytest

from syntree.config import RenderOptions
from syntree.layout import LayoutOptions, layout_tree
from syntree.pipeline import build_tree


class FakeMeasurer:
    """Terminals are 10px per character, constituent labels 12px."""

    def __init__(self):
        self.calls = []

    def text_width(self, text, terminal):
        self.calls.append((text, terminal))
        return (10 if terminal else 12) * len(text)


@pytest.fixture
def measurer():
    return FakeMeasurer()


@pytest.fixture
def layout_options():
    return LayoutOptions(
        font_size=12,
        vertical_spacing=40,
        horizontal_spacing=10,
        padding_above_text=6,
        padding_below_text=6,
        term_lines=False,
    )


@pytest.fixture
def render_options():
    return RenderOptions(font_size=12, vertical_spacing=40, horizontal_spacing=10, margin=15)


@pytest.fixture
def lay_out(measurer, layout_options):
    def _lay_out(text, options=None):
        root = build_tree(text)
        layout_tree(root, measurer, options or layout_options)
        return root

    return _lay_out

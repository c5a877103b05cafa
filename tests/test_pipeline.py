import pytest

from syntree.config import RenderOptions
from syntree.pipeline import build_tree, render_tree


def test_build_tree_links_and_marks_triangles():
    root = build_tree('[S [NP^ the dog] [VP barks]]')
    np, vp = root.children

    assert np.parent is root and np.next is vp
    assert np.children[0].draw_triangle
    assert not vp.children[0].draw_triangle


def test_render_tree_returns_independent_trees(measurer, render_options):
    first = render_tree('[S [NP_1 he] [VP [V left] <1>]]', render_options, measurer)
    second = render_tree('[S [NP_1 he] [VP [V left] <1>]]', render_options, measurer)

    assert first.tree is not second.tree
    assert first.links[0].tail is not second.links[0].tail
    assert first.plan == second.plan


def test_render_tree_validates_options(measurer):
    with pytest.raises(ValueError):
        render_tree('[S a]', RenderOptions(font_size=-1), measurer)


def test_render_tree_survives_malformed_input(measurer, render_options):
    result = render_tree(']] [S [NP', render_options, measurer)

    assert result.plan.width > 0
    assert result.links == []

from syntree.consistency import check_movement
from syntree.pipeline import build_tree


def test_well_formed_movement_has_no_warnings():
    root = build_tree('[CP [NP_1 what] [C\' [C did] [VP [V eat] <1>]]]')

    assert check_movement(root) == []


def test_unmatched_tail_is_reported():
    root = build_tree('[S [NP he] [VP left <2>]]')

    (warning,) = check_movement(root)

    assert warning.kind == 'unmatched-tail'
    assert '_2' in warning.message
    assert warning.message.startswith('[col ')


def test_head_dominating_tail_is_reported():
    root = build_tree('[S_1 [NP he] <1>]')

    kinds = [warning.kind for warning in check_movement(root)]

    assert kinds == ['head-dominates-tail']


def test_duplicate_heads_are_reported_with_the_one_used():
    root = build_tree('[S [NP_1 a] [VP_1 b] [X c <1>]]')

    (warning,) = check_movement(root)

    assert warning.kind == 'duplicate-head'
    assert warning.span == root.children[0].span
    assert "'NP₁'" in warning.message

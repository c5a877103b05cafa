from syntree.movement import ChainMark, MovementLink, find_head, find_movement, resolve_link, resolve_movement
from syntree.pipeline import build_tree


def test_find_head_prefers_descendants_then_first_child():
    root = build_tree('[X_1 [Y_1 a] [Z_1 b]]')

    assert find_head(root, '1').value == 'Y₁'
    assert find_head(root, '9') is None


def test_find_movement_creates_link_per_tail_even_without_head():
    root = build_tree('[S [NP_1 he] [VP [V saw] <1> <2>] [X y <3>]]')

    links = find_movement(root)

    assert [link.tail.tail for link in links] == ['1', '3']
    assert links[0].head.value == 'NP₁'
    assert links[1].head is None


def test_unmatched_tail_is_not_drawn():
    root = build_tree('[S [NP he] [VP left <7>]]')
    (link,) = resolve_movement(root, 40)

    assert not link.should_draw
    assert link.lca is None


def test_head_dominating_tail_is_not_drawn():
    root = build_tree('[S_1 [NP he] <1>]')
    (link,) = resolve_movement(root, 40)

    assert link.head is root
    assert not link.should_draw
    assert link.lca is None


def test_lca_two_levels_up_routes_towards_head_on_the_left(lay_out):
    root = lay_out('[S [NP_1 he] [VP [V left] <1>]]')
    np, vp = root.children
    tail = vp.children[1]

    link = resolve_link(MovementLink(tail=tail, head=np), 40)

    assert link.should_draw
    assert link.lca is root
    assert link.leftwards
    assert link.marks[root] == ChainMark.HEAD | ChainMark.TAIL
    assert link.marks[np] == ChainMark.HEAD
    assert link.marks[vp] == ChainMark.TAIL


def test_routing_rightwards_when_head_is_on_the_right(lay_out):
    root = lay_out('[S [VP [V left] <1>] [NP_1 he]]')
    (link,) = resolve_movement(root, 40)

    assert link.should_draw
    assert link.lca is root
    assert not link.leftwards


def test_clearance_and_destination(lay_out):
    root = lay_out('[S [NP_1 he] [VP [V left] <1>]]')
    np = root.children[0]
    (link,) = resolve_movement(root, 40)

    # the verb under the tail's left sibling is the deepest point in the way
    assert link.max_y == 104.5
    assert link.bottom_y == 144.5
    assert (link.dest_x, link.dest_y) == (np.x, np.max_y)


def test_chain_marks_are_fresh_for_every_link(lay_out):
    root = lay_out('[S [A_1 x] [B [C_2 y] [D [F z <1>]] [E w <2>]]]')
    first, second = resolve_movement(root, 40)

    assert first.lca is root
    assert first.max_y == 144.5
    b = root.children[1]
    assert second.lca is b
    assert second.leftwards
    # D lies between C_2 and E; stale marks from the first link would hide it
    assert second.max_y == 144.5
    assert first.marks is not second.marks
    assert b.children[1] not in second.marks


def test_resolving_twice_gives_same_answer(lay_out):
    root = lay_out('[S [NP_1 he] [VP [V left] <1>]]')
    (link,) = resolve_movement(root, 40)
    snapshot = (link.should_draw, link.leftwards, link.max_y, link.bottom_y, link.lca)

    resolve_link(link, 40)

    assert (link.should_draw, link.leftwards, link.max_y, link.bottom_y, link.lca) == snapshot


def test_duplicate_heads_resolve_to_first_depth_first_match(lay_out):
    root = lay_out('[S [NP_1 a] [VP_1 b] [X c <1>]]')
    (link,) = resolve_movement(root, 40)

    assert link.head is root.children[0]

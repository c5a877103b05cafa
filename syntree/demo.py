from . import build_tree, check_movement, format_tree, render_tree

DEMO = "[CP [NP_1 what] [C' [C did] [TP [NP^ the big dog] [VP [V eat] <1>]]]]"


def run():
    tree = build_tree(DEMO)
    print(f"Canonical: {format_tree(tree)}\n")

    warnings = check_movement(tree)
    print("Warnings:")
    if warnings:
        for warning in warnings:
            print(f"  - {warning}")
    else:
        print("  (none)")

    result = render_tree(DEMO)
    print(f"\nCanvas: {result.plan.width:.0f}x{result.plan.height:.0f}")
    for link in result.links:
        print(
            f"  <{link.tail.tail}> -> {link.head.value if link.head else None}: "
            f"draw={link.should_draw} leftwards={link.leftwards} bottom_y={link.bottom_y}"
        )


if __name__ == "__main__":
    run()

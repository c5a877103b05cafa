import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from syntree import (
    DrawingSurfaceError,
    RenderOptions,
    check_movement,
    encode_png,
    format_tree,
    generate_tikz_document,
    get_render_options,
    render_image,
    render_tree,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _options_from_args(args: argparse.Namespace) -> RenderOptions:
    options = get_render_options()
    if args.font_size is not None:
        options.font_size = args.font_size
    if args.term_font:
        options.term_font = args.term_font
    if args.nonterm_font:
        options.nonterm_font = args.nonterm_font
    if args.vertical_spacing is not None:
        options.vertical_spacing = args.vertical_spacing
    if args.horizontal_spacing is not None:
        options.horizontal_spacing = args.horizontal_spacing
    if args.margin is not None:
        options.margin = args.margin
    if args.term_lines:
        options.term_lines = True
    if args.no_color:
        options.color = False
    return options


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Draw syntax trees from bracket notation")
    parser.add_argument("text", nargs="?", help="Tree in bracket notation, e.g. \"[S [NP I] [VP ran]]\"")
    parser.add_argument("--input", help="Read the bracket notation from this file instead")
    parser.add_argument("-o", "--output", help="Write a PNG image to the given path")
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document to the given path",
    )
    parser.add_argument("--font-size", type=int, help="Font size in pixels (default: 12)")
    parser.add_argument("--term-font", help="Font file or name for terminals")
    parser.add_argument("--nonterm-font", help="Font file or name for constituent labels")
    parser.add_argument("--vertical-spacing", type=float, help="Pixels between tree levels (default: 40)")
    parser.add_argument("--horizontal-spacing", type=float, help="Minimum pixels between siblings (default: 10)")
    parser.add_argument("--margin", type=float, help="Pixels around the tree (default: 15)")
    parser.add_argument(
        "--term-lines",
        action="store_true",
        help="Always draw a line above terminals",
    )
    parser.add_argument("--no-color", action="store_true", help="Draw all text in black")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.input:
        text = Path(args.input).read_text(encoding="utf-8")
    elif args.text is not None:
        text = args.text
    else:
        parser.error("either TEXT or --input is required")

    try:
        options = _options_from_args(args).validate()
    except ValueError as exc:
        parser.error(str(exc))

    try:
        result = render_tree(text, options)
    except DrawingSurfaceError as exc:
        logger.error("Cannot render: %s", exc)
        raise SystemExit(1)

    print(f"Tree: {format_tree(result.tree)}")
    warnings = check_movement(result.tree)
    print("Warnings:")
    if warnings:
        for warning in warnings:
            logger.warning("Movement warning: %s", warning)
            print(f"  - {warning}")
    else:
        print("  (none)")

    print("Movement:")
    if result.links:
        for link in result.links:
            head = link.head.value if link.head is not None else None
            direction = "left" if link.leftwards else "right"
            print(f"  <{link.tail.tail}> -> {head!r}: draw={link.should_draw} direction={direction}")
    else:
        print("  (none)")
    print(f"Canvas: {result.plan.width:.0f}x{result.plan.height:.0f}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing PNG to %s", output_path)
        output_path.write_bytes(encode_png(render_image(result.plan, result.measurer)))
        print(f"PNG written to {output_path}")

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(
            generate_tikz_document(result.plan, source_text=text),
            encoding="utf-8",
        )
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])

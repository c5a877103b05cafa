"""TikZ backend: writes a :class:`DrawPlan` as a standalone LaTeX picture."""

from __future__ import annotations

import math
import re
import unicodedata
from typing import List, Optional, Sequence

import numpy as np

from .ops import CurveOp, DrawPlan, LineOp, Point, PolygonOp, TextOp

_SUBSCRIPT_RUN_RE = re.compile(r'[₀-₉]+')
_FROM_SUBSCRIPT = str.maketrans('₀₁₂₃₄₅₆₇₈₉', '0123456789')

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage{xcolor}
\usepackage{tikz}
\tikzset{
  st/line width/.store in=\stLW,   st/line width=0.4pt,
  connector/.style={line width=\stLW},
  movement/.style={line width=\stLW},
  terminal/.style={anchor=base, inner sep=0pt},
  nonterminal/.style={anchor=base, inner sep=0pt, font=\bfseries},
}
\begin{document}
%s
%s
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _pt(point: Point) -> str:
    return f"({_format_float(point[0])}, {_format_float(point[1])})"


def _escape_text_segment(text: str) -> str:
    text = unicodedata.normalize('NFC', text)
    repl = {
        '\\': r'\textbackslash{}',
        '&':  r'\&',
        '%':  r'\%',
        '$':  r'\$',
        '#':  r'\#',
        '_':  r'\_',
        '{':  r'\{',
        '}':  r'\}',
        '~':  r'\textasciitilde{}',
        '^':  r'\textasciicircum{}',
    }
    return ''.join(repl.get(c, c) for c in text)


def latex_escape(s: str) -> str:
    """Escape a node label for LaTeX, turning subscript digits into ``\\textsubscript``."""
    parts: List[str] = []
    pos = 0
    for m in _SUBSCRIPT_RUN_RE.finditer(s):
        parts.append(_escape_text_segment(s[pos:m.start()]))
        parts.append(r'\textsubscript{' + m.group(0).translate(_FROM_SUBSCRIPT) + '}')
        pos = m.end()
    parts.append(_escape_text_segment(s[pos:]))
    return ''.join(parts)


def _color_name(hex_color: str) -> str:
    return "st" + hex_color.lstrip("#").lower()


def _cubic_controls(op: CurveOp) -> Sequence[np.ndarray]:
    """Raise a quadratic Bezier to the two control points of the equivalent cubic."""
    p0, c, p1 = (np.asarray(p, dtype=float) for p in (op.start, op.control, op.end))
    return p0 + 2.0 / 3.0 * (c - p0), p1 + 2.0 / 3.0 * (c - p1)


def _color_definitions(plan: DrawPlan) -> List[str]:
    colors = []
    for op in plan.ops:
        color = op.fill if isinstance(op, PolygonOp) else op.color
        if color not in colors:
            colors.append(color)
    return [
        f"\\definecolor{{{_color_name(color)}}}{{HTML}}{{{color.lstrip('#').upper()}}}"
        for color in colors
    ]


def generate_tikz_code(plan: DrawPlan) -> str:
    """Emit a ``tikzpicture`` in canvas pixels (1px = 1pt, y growing downwards)."""
    lines: List[str] = _color_definitions(plan)
    lines.append("\\begin{tikzpicture}[x=1pt, y=-1pt]")
    lines.append(
        f"  \\useasboundingbox (0, 0) rectangle {_pt((plan.width, plan.height))};"
    )
    for op in plan.ops:
        if isinstance(op, TextOp):
            style = "terminal" if op.terminal else "nonterminal"
            lines.append(
                f"  \\node[{style}, text={_color_name(op.color)}] at {_pt((op.x, op.y))} "
                f"{{{latex_escape(op.text)}}};"
            )
        elif isinstance(op, LineOp):
            path = " -- ".join(_pt(p) for p in op.points)
            lines.append(f"  \\draw[connector, {_color_name(op.color)}] {path};")
        elif isinstance(op, CurveOp):
            c1, c2 = _cubic_controls(op)
            lines.append(
                f"  \\draw[movement, {_color_name(op.color)}] {_pt(op.start)} .. controls "
                f"{_pt(c1)} and {_pt(c2)} .. {_pt(op.end)};"
            )
        elif isinstance(op, PolygonOp):
            path = " -- ".join(_pt(p) for p in op.points)
            lines.append(f"  \\fill[{_color_name(op.fill)}] {path} -- cycle;")
        else:
            raise TypeError(f"unsupported draw operation {op!r}")
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(plan: DrawPlan, *, source_text: Optional[str] = None) -> str:
    """Render a standalone document around :func:`generate_tikz_code`."""

    header = ""
    if source_text:
        header = "% " + source_text.strip().replace("\n", " ")
    return standalone_tpl % (header, generate_tikz_code(plan))

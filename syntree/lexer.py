import re
from typing import List, NamedTuple, Optional, Tuple

LBRACK = '['
RBRACK = ']'

_tail_re = re.compile(r'\s*<(\w+)>\s*')
_head_re = re.compile(r'_(\w+)\Z')
_digits_re = re.compile(r'[0-9]+\Z')

SUBSCRIPT_DIGITS = str.maketrans('0123456789', '₀₁₂₃₄₅₆₇₈₉')


class Label(NamedTuple):
    value: str
    starred: bool
    head: Optional[str]


def pad_brackets(text: str) -> str:
    """Trim ``text`` and pad it until its brackets balance."""
    text = text.strip()
    depth = 0
    for ch in text:
        if ch == LBRACK:
            depth += 1
        elif ch == RBRACK:
            depth -= 1
    if depth < 0:
        text = LBRACK * -depth + text
    elif depth > 0:
        text = text + RBRACK * depth
    return text


def is_numeric_label(name: str) -> bool:
    return bool(_digits_re.match(name))


def subscriptify(digits: str) -> str:
    return ''.join(ch for ch in digits if ch.isdigit()).translate(SUBSCRIPT_DIGITS)


def split_terminal(text: str) -> Tuple[str, Optional[str]]:
    """Return ``(display_text, tail)`` for terminal text.

    Only the first ``<name>`` annotation is extracted; the whitespace around it
    collapses to a single space.
    """
    tail = None
    m = _tail_re.search(text)
    if m:
        tail = m.group(1)
        text = text[:m.start()] + ' ' + text[m.end():]
    return text.strip(), tail


def has_tail_annotation(text: str) -> bool:
    return _tail_re.search(text) is not None


def split_label(raw: str) -> Label:
    starred = '^' in raw
    value = raw.replace('^', '', 1)
    head = None
    m = _head_re.search(value)
    if m:
        head = m.group(1)
        suffix = subscriptify(head) if is_numeric_label(head) else ''
        value = value[:m.start()] + suffix
    return Label(value, starred, head)


def scan_label(text: str, i: int) -> int:
    """Return the index just past the label starting at ``i``."""
    n = len(text)
    while i < n and not text[i].isspace() and text[i] not in (LBRACK, RBRACK):
        i += 1
    return i


def split_children(text: str, i: int) -> Tuple[List[Tuple[int, int]], int]:
    """Split the body of a constituent into child spans.

    ``i`` points just past the label. Returns the ``(start, end)`` span of each
    non-blank child at depth one, and the index just past the closing bracket
    (or ``len(text)`` when the constituent is never closed).
    """
    spans: List[Tuple[int, int]] = []
    n = len(text)
    while i < n and text[i].isspace():
        i += 1
    depth = 1
    start = i
    while i < n:
        before = depth
        ch = text[i]
        if ch == LBRACK:
            depth += 1
        elif ch == RBRACK:
            depth -= 1
        if before == 1 and depth in (0, 2):
            # a text run ends where a constituent opens or the parent closes
            if text[start:i].strip():
                spans.append((start, i))
            start = i
            if depth == 0:
                return spans, i + 1
        elif before == 2 and depth == 1:
            spans.append((start, i + 1))
            start = i + 1
        i += 1
    if text[start:n].strip():
        spans.append((start, n))
    return spans, n

"""
Utility functions for source scanning.
"""

from typing import List

_QUOTES = ("'", '"', "`")

# A "/" after one of these (or at the start of input) opens a regex literal.
_REGEX_PREFIX = set("(,=:[!&|?{};+-*%<>~^")
_REGEX_KEYWORDS = {
    "return", "typeof", "instanceof", "case", "do", "else", "in", "of",
    "new", "delete", "void", "throw", "yield", "await",
}


def _is_ident(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


def _regex_allowed(out: List[str]) -> bool:
    """True if a "/" following the masked text in ``out`` starts a regex."""
    j = len(out) - 1
    while j >= 0 and out[j].isspace():
        j -= 1
    if j < 0:
        return True
    if out[j] in _REGEX_PREFIX:
        return True
    if not _is_ident(out[j]):
        return False
    k = j
    while k >= 0 and _is_ident(out[k]):
        k -= 1
    return "".join(out[k + 1:j + 1]) in _REGEX_KEYWORDS


def _regex_end(code: str, start: int) -> int:
    """Index of the closing "/" of a regex opened at ``start``, or -1."""
    i = start + 1
    in_class = False
    while i < len(code):
        ch = code[i]
        if ch == "\n":
            return -1
        if ch == "\\":
            i += 2
            continue
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "/":
            return i
        i += 1
    return -1


def mask_source(code: str) -> List[str]:
    """Return the source lines with comment, string and regex contents blanked out.

    Quote characters, regex slashes and line structure are kept, so
    line/column positions in the masked text match the input. Template
    literals are masked except for their ``${...}`` expressions, which are
    scanned as code.
    """
    out: List[str] = []
    i = 0
    n = len(code)
    quote = None
    # brace depth of each open ${...} expression
    expressions: List[int] = []
    in_line_comment = False
    in_block_comment = False
    if code.startswith("#!"):
        end = code.find("\n")
        end = n if end == -1 else end
        out.extend(" " * end)
        i = end
    while i < n:
        ch = code[i]
        nxt = code[i + 1] if i + 1 < n else ""
        if ch == "\n":
            out.append(ch)
            in_line_comment = False
            if quote in ("'", '"'):
                quote = None
            i += 1
            continue
        if in_line_comment:
            out.append(" ")
        elif in_block_comment:
            if ch == "*" and nxt == "/":
                out.extend("  ")
                in_block_comment = False
                i += 2
                continue
            out.append(" ")
        elif quote:
            if ch == "\\" and nxt and nxt != "\n":
                out.extend("  ")
                i += 2
                continue
            if quote == "`" and ch == "$" and nxt == "{":
                out.extend("${")
                expressions.append(0)
                quote = None
                i += 2
                continue
            if ch == quote:
                out.append(ch)
                quote = None
            else:
                out.append(" ")
        elif ch == "/" and nxt == "/":
            out.extend("  ")
            in_line_comment = True
            i += 2
            continue
        elif ch == "/" and nxt == "*":
            out.extend("  ")
            in_block_comment = True
            i += 2
            continue
        elif ch == "/" and _regex_allowed(out):
            end = _regex_end(code, i)
            if end == -1:
                out.append(ch)
            else:
                out.append("/")
                out.extend(" " * (end - i - 1))
                out.append("/")
                i = end + 1
                continue
        elif ch in _QUOTES:
            out.append(ch)
            quote = ch
        elif expressions and ch == "{":
            expressions[-1] += 1
            out.append(ch)
        elif expressions and ch == "}":
            out.append(ch)
            if expressions[-1] == 0:
                expressions.pop()
                quote = "`"
            else:
                expressions[-1] -= 1
        else:
            out.append(ch)
        i += 1
    return "".join(out).split("\n")

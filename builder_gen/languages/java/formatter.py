"""
Minimal Java source formatter.

Re-indents by brace depth and normalises blank lines and line endings. It
does not reflow statements, so it only suits code that already has one
statement or declaration per line.
"""

from typing import List, Optional, Tuple

# Scanner states carried from one line to the next
BLOCK_COMMENT = "comment"
TEXT_BLOCK = "text"


def _scan_line(line: str, state: Optional[str] = None) -> Tuple[int, int, Optional[str]]:
    """
    Count braces outside literals and comments.

    Args:
        line: One source line
        state: ``BLOCK_COMMENT`` or ``TEXT_BLOCK`` when the line starts inside
            one, else None

    Returns:
        (leading closers, net depth change, state at the end of the line)
    """
    leading_closers = 0
    seen_code = False
    depth = 0
    quote = None
    i = 0

    while i < len(line):
        char = line[i]

        if state == BLOCK_COMMENT:
            if line.startswith("*/", i):
                state = None
                i += 2
                continue
        elif state == TEXT_BLOCK:
            if char == "\\":
                i += 2
                continue
            if line.startswith('"""', i):
                state = None
                seen_code = True
                i += 3
                continue
        elif quote:
            if char == "\\":
                i += 2
                continue
            if char == quote:
                quote = None
        elif line.startswith('"""', i):
            state = TEXT_BLOCK
            seen_code = True
            i += 3
            continue
        elif char in ('"', "'"):
            quote = char
            seen_code = True
        elif line.startswith("//", i):
            break
        elif line.startswith("/*", i):
            state = BLOCK_COMMENT
            i += 2
            continue
        elif char == "{":
            depth += 1
            seen_code = True
        elif char == "}":
            depth -= 1
            if not seen_code:
                leading_closers += 1
        elif not char.isspace():
            seen_code = True

        i += 1

    return leading_closers, depth, state


def format_java_source(
    source: str, indent: str = "    ", line_ending: str = "\n"
) -> str:
    """
    Re-indent Java source and clean up whitespace.

    - every line is indented one level per open brace
    - braces inside literals, comments and text blocks are not counted
    - text block content is kept as written
    - trailing whitespace is removed
    - runs of blank lines collapse to one
    - blank lines directly after ``{`` or before ``}`` are dropped
    - output ends with exactly one line ending

    Args:
        source: Java source text
        indent: One indentation level
        line_ending: Line separator of the output

    Returns:
        Formatted source
    """
    lines: List[str] = []
    depth = 0
    state = None

    for raw_line in source.replace("\r\n", "\n").split("\n"):
        if state == TEXT_BLOCK:
            lines.append(raw_line)
            _, delta, state = _scan_line(raw_line, state)
            depth = max(depth + delta, 0)
            continue

        stripped = raw_line.strip()

        if not stripped:
            # Keep at most one blank line, never right after an opening brace
            if lines and lines[-1] and not lines[-1].endswith("{"):
                lines.append("")
            continue

        in_comment = state == BLOCK_COMMENT
        leading_closers, delta, state = _scan_line(stripped, state)

        if not in_comment and stripped.startswith("}") and lines and not lines[-1]:
            lines.pop()

        if in_comment and stripped.startswith("*"):
            # Javadoc continuation lines line up under the opening "/*"
            stripped = " " + stripped

        level = max(depth - leading_closers, 0)
        lines.append(indent * level + stripped)
        depth = max(depth + delta, 0)

    while lines and not lines[-1]:
        lines.pop()

    return line_ending.join(lines) + line_ending

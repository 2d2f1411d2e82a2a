"""Line-prefix comment detection.

Not a lexer. A line counts as commented when its trimmed text starts with
``//``, ``/*`` or ``*``. Block-comment state is not tracked across lines, so a
line inside ``/* ... */`` that does not itself start with ``*`` is live code,
and a live continuation line starting with ``*`` (multiplication) is skipped.
"""

COMMENT_PREFIXES = ("//", "/*", "*")


def is_commented(line: str) -> bool:
    return line.strip().startswith(COMMENT_PREFIXES)

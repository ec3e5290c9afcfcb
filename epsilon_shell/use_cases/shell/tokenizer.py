"""
Tokenizer for shell input lines.
"""


def is_blank(line: str) -> bool:
    """True for an empty or whitespace-only line."""
    return not line or line.isspace()


def tokenize(line: str) -> list[str]:
    """
    Split a line on the space character, dropping empty entries.

    No quoting or escaping: ``fs wr "a b"`` yields ``['fs', 'wr', '"a', 'b"']``.
    """
    return [token for token in line.split(" ") if token]

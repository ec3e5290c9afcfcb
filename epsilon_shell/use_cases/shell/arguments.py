"""
Recovery of verbatim command arguments from the raw input line.
"""


def get_command_arguments(line: str, tokens: list[str], skip_count: int) -> str:
    """
    Return the part of ``line`` that follows its first ``skip_count`` tokens.

    Each token is searched forward from the end of the previous match, and the
    run of spaces right after it is consumed. Spacing inside the remainder is
    kept as typed, which re-joining the tokens would lose.

    Args:
        line: Raw input line
        tokens: Tokens of ``line`` in order
        skip_count: Number of leading tokens to skip

    Returns:
        The remainder of the line, or "" if a token cannot be located or
        nothing is left after the skipped tokens
    """
    index = 0

    for token in tokens[:skip_count]:
        found_at = line.find(token, index)
        if found_at < 0:
            return ""

        index = found_at + len(token)
        while index < len(line) and line[index] == " ":
            index += 1

    if index >= len(line):
        return ""

    return line[index:]

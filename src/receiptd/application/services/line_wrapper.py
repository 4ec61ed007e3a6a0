from typing import List


def wrap(text: str, max_length: int) -> List[str]:
    """
    Split text that runs past max_length characters into separate lines.

    Greedy: the last whitespace or hyphen within the first max_length + 1
    characters ends the line (and stays on it). Without one, the line is
    cut at max_length + 1 characters and a hyphen is appended. Every
    continuation line starts with a single space.
    """
    if not text:
        return []
    if max_length < 1:
        raise ValueError("max_length must be at least 1")

    lines = [text]
    while len(lines[-1]) > max_length:
        last_line = lines.pop()
        index = _last_break(last_line[: max_length + 1])
        if index > 0:
            head, tail = last_line[: index + 1], last_line[index + 1 :]
        else:
            head, tail = last_line[: max_length + 1], last_line[max_length + 1 :]
            if tail:
                head = f"{head}-"
        lines.append(head)
        # nothing left to carry over: the line overflows by one character
        if not tail:
            break
        lines.append(f" {tail}")
    return lines


def _last_break(window: str) -> int:
    # position 0 is never a usable break; it is the continuation's own space
    for index in range(len(window) - 1, 0, -1):
        char = window[index]
        if char.isspace() or char == "-":
            return index
    return -1

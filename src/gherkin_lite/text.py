from __future__ import annotations

from typing import Deque, List
from collections import deque

from gherkin_lite.constants import PATTERN_TAG


class LineCursor:
    """Forward only cursor over the lines of a text.

    `current` is the line under the cursor, once all lines has been consumed `current`
    is an empty string and `exhausted` is `True`.
    """

    current: str
    rest: Deque[str]
    exhausted: bool

    def __init__(self, text: str) -> None:
        lines = text.split('\n')
        self.current = lines[0]
        self.rest = deque(lines[1:])
        self.exhausted = False

    def advance(self) -> None:
        if len(self.rest) < 1:
            self.current = ''
            self.exhausted = True
        else:
            self.current = self.rest.popleft()

    def is_current_line_empty(self) -> bool:
        return is_blank(self.current)


def is_blank(line: str) -> bool:
    return line.strip() == ''


def find_tags(line: str) -> List[str]:
    return PATTERN_TAG.findall(line)


def split_table_row(line: str) -> List[str]:
    # cells are trimmed after the empty fragments are removed, so `| |` yields one empty cell
    cells = [cell for cell in line.strip().split('|') if len(cell) > 0]

    return [cell.strip() for cell in cells]

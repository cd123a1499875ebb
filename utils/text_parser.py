"""
Generated text to item list
"""

import re
from typing import List

NEWLINE = re.compile(r"\r?\n")


def parse_lines(raw: str, limit: int) -> List[str]:
    """Split on newlines, trim, drop blanks and keep at most `limit` items in order"""
    lines = [line.strip() for line in NEWLINE.split(raw)]
    return [line for line in lines if line][:limit]

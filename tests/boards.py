from typing import List

EMPTY_ROW = "0000000"


def encode(rows: List[str]) -> str:
    """Join row strings such as '0011000' into a board encoding"""
    return ";".join(",".join(row) for row in rows)

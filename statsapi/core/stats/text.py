from typing import List


def split_dropping_trailing(value: str, separator: str) -> List[str]:
    """
    Split on a literal separator and drop trailing empty parts.

    A value without the separator is returned whole, even when empty:
        "a,b,"  → ["a", "b"]
        ",a"    → ["", "a"]
        ""      → [""]
        ",,"    → []
    """
    if separator not in value:
        return [value]

    parts = value.split(separator)
    while parts and parts[-1] == "":
        parts.pop()
    return parts

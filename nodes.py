"""
Node record for the graph editor.

Nodes are identified by a stable integer index assigned in insertion order.
The position is owned by whatever renders the canvas; the core only stores it.
"""

from dataclasses import dataclass
from typing import Any


def generate_label(index: int) -> str:
    """
    Spreadsheet-column style label for a node index.

    0 -> "A", 25 -> "Z", 26 -> "AA", 51 -> "AZ", 52 -> "BA".
    """
    if index < 0:
        raise ValueError(f"Node index must be non-negative, got {index}")

    label = ""
    while index >= 0:
        label = chr(ord("A") + index % 26) + label
        index = index // 26 - 1
    return label


@dataclass
class Node:
    """
    Graph vertex placed on the canvas.

    Only `selected` changes after creation.
    """

    index: int
    label: str
    position: Any
    selected: bool = False

"""Node and branch counts of an unrooted binary tree."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_BRANCH_LENGTH = -math.log(0.9)

LARGE_TREE_TIPS = 2000


@dataclass
class TreeNumbers:
    tip_nodes: int = 0
    inner_nodes: int = 0
    nodes: int = 0
    branches: int = 0

    @classmethod
    def from_tips(cls, tip_nodes: int) -> TreeNumbers:
        """Counts for a fully resolved unrooted tree with ``tip_nodes`` tips."""
        if tip_nodes < 2:
            raise ValueError("an unrooted tree needs at least two tips")
        inner = tip_nodes - 2
        nodes = inner + tip_nodes
        return cls(tip_nodes, inner, nodes, nodes - 1)

    def large_tree(self) -> bool:
        return self.tip_nodes > LARGE_TREE_TIPS
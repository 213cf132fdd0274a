"""Game tree layer: nodes, variations, annotations and editing.

Quick start::

    from pgntree.game import GameTree

    tree = GameTree()
    e4 = tree.add_move(tree.root, "e4")
    tree.add_move(e4, "c5")
    tree.add_move(tree.root, "d4")  # alternative to 1. e4
"""

from pgntree.game.node import Annotation, Node
from pgntree.game.tree import GameTree

__all__ = [
    "Annotation",
    "GameTree",
    "Node",
]

"""Classic sorting, graph, tree and puzzle algorithms."""

__version__ = "0.1.0"
__all__ = [
    "bfs",
    "bst",
    "dfs",
    "linked_list",
    "puzzles",
    "sorting",
    "spanning_tree",
]
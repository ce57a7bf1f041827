"""Classic algorithms and data structures, a rock-paper-scissors game and socket exercises."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "containers",
    "dynamic",
    "games",
    "greedy",
    "linked_list",
    "network",
    "numbers",
    "searching",
    "sorting",
    "tree",
]
"""Classic algorithm exercises: backtracking, stacks, trees, grid search and scheduling."""

__version__ = "0.1.0"
__all__ = [
    "backtracking",
    "islands",
    "min_stack",
    "queue_stack",
    "scheduling",
    "stacks",
    "trees",
]
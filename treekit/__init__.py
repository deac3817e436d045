"""Binary search trees, AVL trees, a tree-backed priority queue and a sorting benchmark."""

__version__ = "0.1.0"
__all__ = ["avl", "benchmark", "bst", "priority_queue"]
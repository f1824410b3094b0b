from .node import ReviewInput, reviewer_node

__all__ = ["ReviewInput", "reviewer_node"]

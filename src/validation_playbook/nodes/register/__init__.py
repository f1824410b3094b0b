from .node import register_node

__all__ = ["register_node"]

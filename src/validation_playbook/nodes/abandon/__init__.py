from .node import abandon_node

__all__ = ["abandon_node"]

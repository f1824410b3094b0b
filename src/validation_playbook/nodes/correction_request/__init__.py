from .node import correction_request_node

__all__ = ["correction_request_node"]

"""
Intake Module

Validates the submitted payload against EmployeeCreate.
"""

from .node import intake_node

__all__ = ["intake_node"]

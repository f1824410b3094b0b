"""
Domain Models Package

This package contains the Pydantic example models used across the system:
- Address / Employee: nested-model parsing
- User: coercion, optional fields and defaults
- Product: constraints, field validators and computed fields
- Config: application settings with a cross-field rule

These models do not depend on any workflow or HTTP logic.
"""

from .address import Address
from .config import Config
from .employee import Employee, EmployeeCreate
from .product import Product, ProductCreate
from .user import User, UserCreate

__all__ = [
    "Address",
    "Config",
    "Employee",
    "EmployeeCreate",
    "Product",
    "ProductCreate",
    "User",
    "UserCreate",
]

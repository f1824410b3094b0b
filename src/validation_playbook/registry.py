"""
Model Registry

Central name -> model class lookup for the example models, used by the
generic validation endpoint and the reference renderer.
"""

from typing import Dict, List, Type

from pydantic import BaseModel

from validation_playbook.models import Address, Config, EmployeeCreate, ProductCreate, UserCreate


class UnknownModelError(KeyError):
    """Raised when a model name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown model '{self.name}'"


class ModelRegistry:
    """Registry of example models (Singleton Pattern)"""

    _models: Dict[str, Type[BaseModel]] = {
        "user": UserCreate,
        "product": ProductCreate,
        "employee": EmployeeCreate,
        "address": Address,
        "config": Config,
    }

    @classmethod
    def get_model(cls, name: str) -> Type[BaseModel]:
        """
        Looks up a model by name (case-insensitive).

        Raises:
            UnknownModelError: if no model is registered under that name
        """
        key = name.strip().lower()
        if key not in cls._models:
            raise UnknownModelError(name)
        return cls._models[key]

    @classmethod
    def list_models(cls) -> List[str]:
        return list(cls._models.keys())

    @classmethod
    def all_models(cls) -> List[Type[BaseModel]]:
        return list(cls._models.values())

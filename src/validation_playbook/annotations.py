"""
Annotated Type Aliases & Metadata Introspection

This module defines the reusable `Annotated` aliases shared by all example
models, and the helpers that read their metadata back out:
- Doc: a human-readable metadata marker
- describe_annotation: unwrap an Annotated type into base type, docs and constraints
- field_constraints / field_catalog: the same view over a Pydantic model's fields
"""

import inspect
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Optional, Tuple, get_args, get_origin

import annotated_types
from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined


@dataclass(frozen=True)
class Doc:
    """Descriptive metadata attached to a type via Annotated[T, Doc("...")]."""
    text: str


# Constraint keywords we surface, in display order
CONSTRAINT_KEYS: Tuple[str, ...] = (
    "gt",
    "ge",
    "lt",
    "le",
    "multiple_of",
    "min_length",
    "max_length",
    "pattern",
)

EMAIL_PATTERN = r"^[\w\.\+-]+@[\w\.-]+\.\w+$"


# --- Aliases ---

NonEmptyStr = Annotated[str, Field(min_length=1), Doc("Non-blank text")]
PositiveInt = Annotated[int, Field(gt=0), Doc("Strictly positive integer")]
PositivePrice = Annotated[float, Field(gt=0), Doc("Strictly positive amount")]
Percentage = Annotated[float, Field(ge=0, le=100), Doc("Percentage between 0 and 100")]
Age = Annotated[int, Field(ge=0, le=130), Doc("Age in years")]
Email = Annotated[str, Field(pattern=EMAIL_PATTERN), Doc("Email address")]
ZipCode = Annotated[str, Field(pattern=r"^[0-9A-Za-z\- ]{3,10}$"), Doc("Postal code")]
CountryCode = Annotated[str, Field(pattern=r"^[A-Z]{2}$"), Doc("ISO 3166-1 alpha-2 country code")]


@dataclass
class AnnotationInfo:
    """Result of unwrapping an Annotated type."""
    base_type: Any
    docs: List[str] = field(default_factory=list)
    constraints: Dict[str, Any] = field(default_factory=dict)


@dataclass
class FieldSpec:
    """One row of a model's field catalog."""
    name: str
    type_label: str
    required: bool
    default: Optional[str]
    constraints: Dict[str, Any]
    description: str


def _collect_constraint(meta: Any, constraints: Dict[str, Any]) -> None:
    """Copies known constraint keywords from a single metadata object."""
    for key in CONSTRAINT_KEYS:
        value = getattr(meta, key, None)
        if value is not None:
            constraints[key] = value


def describe_annotation(tp: Any) -> AnnotationInfo:
    """
    Unwraps a (possibly nested) Annotated type.

    Collects Doc texts in declaration order and constraint keywords from
    Field(...) metadata or bare annotated_types objects (Gt, MaxLen, ...).
    A plain type comes back unchanged with empty docs and constraints.
    """
    info = AnnotationInfo(base_type=tp)
    while get_origin(info.base_type) is Annotated:
        base, *extras = get_args(info.base_type)
        info.base_type = base
        for meta in extras:
            if isinstance(meta, Doc):
                info.docs.append(meta.text)
            elif isinstance(meta, FieldInfo):
                info.constraints.update(field_constraints(meta))
                if meta.description:
                    info.docs.append(meta.description)
            elif isinstance(meta, annotated_types.BaseMetadata):
                _collect_constraint(meta, info.constraints)
    return info


def field_constraints(field_info: FieldInfo) -> Dict[str, Any]:
    """
    Constraint keywords declared on a Pydantic FieldInfo.

    Pydantic only lifts Annotated metadata onto the field when the alias is the
    outermost type; for Optional[Alias] the constraints are read from the
    union member instead.
    """
    constraints: Dict[str, Any] = {}
    for meta in field_info.metadata:
        _collect_constraint(meta, constraints)
    if not constraints:
        for arg in _optional_members(field_info.annotation):
            constraints.update(describe_annotation(arg).constraints)
    return constraints


def _optional_members(annotation: Any) -> List[Any]:
    """Non-None members of Optional[X] / X | None; empty for anything else."""
    args = get_args(annotation)
    if get_origin(annotation) is Annotated or type(None) not in args:
        return []
    return [a for a in args if a is not type(None)]


def type_label(annotation: Any) -> str:
    """Short display name for a type: int, Optional[int], List[str], Address."""
    args = get_args(annotation)
    origin = get_origin(annotation)

    if origin is Annotated:
        return type_label(args[0])

    if origin is None:
        if annotation is type(None):
            return "None"
        return getattr(annotation, "__name__", str(annotation).replace("typing.", ""))

    # Optional[X] / X | None
    if type(None) in args and len(args) == 2:
        inner = next(a for a in args if a is not type(None))
        return f"Optional[{type_label(inner)}]"

    origin_name = getattr(origin, "__name__", str(origin).replace("typing.", ""))
    names = {"list": "List", "dict": "Dict", "set": "Set", "tuple": "Tuple", "UnionType": "Union"}
    origin_name = names.get(origin_name, origin_name)
    if origin_name == "Literal":
        return "Literal[" + ", ".join(repr(a) for a in args) + "]"
    return f"{origin_name}[{', '.join(type_label(a) for a in args)}]"


def _default_label(field_info: FieldInfo) -> Optional[str]:
    if field_info.is_required():
        return None
    if field_info.default_factory is not None:
        return "[]" if field_info.default_factory is list else "<factory>"
    if field_info.default is PydanticUndefined:
        return None
    value = field_info.default
    if hasattr(value, "value") and isinstance(value, str):
        value = value.value
    return repr(value)


def _declared_annotations(model_cls: type[BaseModel]) -> Dict[str, Any]:
    # BaseModel itself carries TYPE_CHECKING-only annotations; only our subclasses are read
    hints: Dict[str, Any] = {}
    for klass in reversed(model_cls.__mro__):
        if klass is BaseModel or not (isinstance(klass, type) and issubclass(klass, BaseModel)):
            continue
        hints.update(inspect.get_annotations(klass))
    return hints


def field_catalog(model_cls: type[BaseModel]) -> List[FieldSpec]:
    """
    Describes every field of a model in declaration order.

    The description is the field's own description, falling back to the Doc
    texts carried by the Annotated alias it was declared with.
    """
    hints = _declared_annotations(model_cls)
    catalog = []
    for name, field_info in model_cls.model_fields.items():
        description = field_info.description or ""
        if not description and name in hints:
            description = "; ".join(describe_annotation(hints[name]).docs)
        if not description:
            docs = [d for arg in _optional_members(field_info.annotation) for d in describe_annotation(arg).docs]
            description = "; ".join(docs)
        catalog.append(
            FieldSpec(
                name=name,
                type_label=type_label(field_info.annotation),
                required=field_info.is_required(),
                default=_default_label(field_info),
                constraints=field_constraints(field_info),
                description=description,
            )
        )
    return catalog

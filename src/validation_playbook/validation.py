"""
Payload Validation

Wraps Pydantic's ValidationError into a stable, serializable report:
- validate_payload: never raises for bad data, returns a ValidationReport
- parse_or_raise: returns the model instance or raises PayloadValidationError
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

ROOT_LOC = "__root__"


class ErrorDetail(BaseModel):
    """A single validation failure."""
    loc: str
    message: str
    error_type: str
    input: Any = None


class ValidationReport(BaseModel):
    """Outcome of validating one payload against one model."""
    model: str
    valid: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[ErrorDetail] = []

    def summary(self) -> str:
        if self.valid:
            return f"✅ {self.model}: valid"
        first = self.errors[0]
        more = f" (+{len(self.errors) - 1} more)" if len(self.errors) > 1 else ""
        return f"❌ {self.model}: {len(self.errors)} error(s), {first.loc}: {first.message}{more}"


class PayloadValidationError(ValueError):
    """Raised by parse_or_raise when a payload does not fit its model."""

    def __init__(self, model: str, errors: List[ErrorDetail]):
        self.model = model
        self.errors = errors
        super().__init__(f"{model} payload is invalid ({len(errors)} error(s))")


def _format_loc(loc) -> str:
    if not loc:
        return ROOT_LOC
    return ".".join(str(part) for part in loc)


def errors_from_exception(exc: ValidationError) -> List[ErrorDetail]:
    """Flattens a Pydantic ValidationError into ErrorDetail entries."""
    return [
        ErrorDetail(
            loc=_format_loc(err.get("loc")),
            message=err.get("msg", ""),
            error_type=err.get("type", "unknown"),
            input=err.get("input"),
        )
        for err in exc.errors(include_url=False)
    ]


def _not_a_mapping(payload: Any) -> ErrorDetail:
    return ErrorDetail(
        loc=ROOT_LOC,
        message=f"Input should be an object, got {type(payload).__name__}",
        error_type="model_type",
        input=payload,
    )


def validate_payload(model_cls: Type[BaseModel], payload: Any) -> ValidationReport:
    """
    Validates a raw payload against a model.

    Returns:
        ValidationReport: `data` holds the JSON-mode dump when valid,
        `errors` the flattened failures otherwise.
    """
    name = model_cls.__name__
    if not isinstance(payload, dict):
        return ValidationReport(model=name, valid=False, errors=[_not_a_mapping(payload)])

    try:
        instance = model_cls.model_validate(payload)
    except ValidationError as e:
        return ValidationReport(model=name, valid=False, errors=errors_from_exception(e))

    return ValidationReport(model=name, valid=True, data=instance.model_dump(mode="json"))


def parse_or_raise(model_cls: Type[BaseModel], payload: Any) -> BaseModel:
    """Validates a payload, raising PayloadValidationError on failure."""
    if not isinstance(payload, dict):
        raise PayloadValidationError(model_cls.__name__, [_not_a_mapping(payload)])
    try:
        return model_cls.model_validate(payload)
    except ValidationError as e:
        raise PayloadValidationError(model_cls.__name__, errors_from_exception(e)) from e

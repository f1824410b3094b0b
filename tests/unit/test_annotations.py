"""
Unit tests for Annotated aliases and metadata introspection.
"""

from typing import Annotated, List, Optional

import annotated_types

from validation_playbook.annotations import (
    EMAIL_PATTERN,
    Doc,
    Email,
    NonEmptyStr,
    Percentage,
    PositiveInt,
    describe_annotation,
    field_catalog,
    field_constraints,
    type_label,
)
from validation_playbook.models import Address, Config, EmployeeCreate, UserCreate


class TestDescribeAnnotation:

    def test_alias_with_field_metadata(self):
        info = describe_annotation(PositiveInt)
        assert info.base_type is int
        assert info.docs == ["Strictly positive integer"]
        assert info.constraints == {"gt": 0}

    def test_range_alias(self):
        assert describe_annotation(Percentage).constraints == {"ge": 0, "le": 100}

    def test_pattern(self):
        assert describe_annotation(Email).constraints == {"pattern": EMAIL_PATTERN}

    def test_plain_type(self):
        info = describe_annotation(int)
        assert info.base_type is int
        assert info.docs == []
        assert info.constraints == {}

    def test_bare_annotated_types_metadata(self):
        info = describe_annotation(Annotated[str, annotated_types.MaxLen(5), Doc("short code")])
        assert info.base_type is str
        assert info.constraints == {"max_length": 5}
        assert info.docs == ["short code"]

    def test_nested_annotated_is_flattened(self):
        info = describe_annotation(Annotated[NonEmptyStr, Doc("Display name")])
        assert info.base_type is str
        assert info.docs == ["Non-blank text", "Display name"]
        assert info.constraints == {"min_length": 1}


class TestTypeLabel:

    def test_labels(self):
        assert type_label(int) == "int"
        assert type_label(Optional[int]) == "Optional[int]"
        assert type_label(List[str]) == "List[str]"
        assert type_label(list[str]) == "List[str]"
        assert type_label(Address) == "Address"
        assert type_label(PositiveInt) == "int"


class TestFieldCatalog:

    def test_user_catalog(self):
        catalog = {spec.name: spec for spec in field_catalog(UserCreate)}
        assert list(catalog) == ["name", "email", "age", "is_active", "tags"]

        name = catalog["name"]
        assert name.required is True
        assert name.default is None
        assert name.constraints == {"min_length": 1}
        assert name.description == "Non-blank text"

        age = catalog["age"]
        assert age.type_label == "Optional[int]"
        assert age.default == "None"
        assert age.description == "Age in years (0-130)"

        assert catalog["is_active"].default == "True"
        assert catalog["tags"].default == "[]"

    def test_nested_model_field(self):
        catalog = {spec.name: spec for spec in field_catalog(EmployeeCreate)}
        assert catalog["address"].type_label == "Address"
        assert catalog["address"].required is True
        assert catalog["salary"].constraints == {"gt": 0}

    def test_literal_default(self):
        catalog = {spec.name: spec for spec in field_catalog(Config)}
        assert catalog["environment"].default == "'development'"
        assert catalog["environment"].type_label.startswith("Literal[")
        assert catalog["max_connections"].constraints == {"gt": 0, "le": 1000}

    def test_optional_alias_keeps_its_constraints(self):
        user = {spec.name: spec for spec in field_catalog(UserCreate)}
        assert user["age"].constraints == {"ge": 0, "le": 130}

        employee = {spec.name: spec for spec in field_catalog(EmployeeCreate)}
        assert employee["email"].constraints == {"pattern": EMAIL_PATTERN}

    def test_optional_alias_constraints_from_field_info(self):
        assert field_constraints(UserCreate.model_fields["age"]) == {"ge": 0, "le": 130}
        assert field_constraints(UserCreate.model_fields["is_active"]) == {}

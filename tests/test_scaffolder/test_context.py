"""Tests for the template variable context."""

from __future__ import annotations

import dataclasses

import pytest

from apiscaffold.scaffolder.context import CONTEXT_VARIABLES, VariableContext
from apiscaffold.scaffolder.errors import InvalidContext, ScaffoldError


pytestmark = pytest.mark.unit


class TestVariableContext:
    def test_name_is_verbatim(self):
        assert VariableContext("MyTiffin").name == "MyTiffin"

    def test_name_lower(self):
        assert VariableContext("MyTiffin").name_lower == "mytiffin"

    def test_as_dict_exposes_only_known_variables(self):
        values = VariableContext("Shop-API").as_dict()
        assert values == {"name": "Shop-API", "name_lower": "shop-api"}
        assert set(values) == CONTEXT_VARIABLES

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidContext):
            VariableContext("")

    def test_non_string_rejected(self):
        with pytest.raises(InvalidContext):
            VariableContext(None)  # type: ignore[arg-type]

    def test_invalid_context_is_scaffold_error(self):
        with pytest.raises(ScaffoldError):
            VariableContext("")

    def test_frozen(self):
        ctx = VariableContext("app")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.project_name = "other"  # type: ignore[misc]

    def test_characters_are_not_sanitised(self):
        ctx = VariableContext("my app!")
        assert ctx.name == "my app!"

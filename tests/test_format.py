# Copyright 2024 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# For further info, check https://github.com/canonical/charmreader
"""Tests for the pydantic errors formatting."""
import pydantic
import pytest

from charmreader.format import format_pydantic_errors


class Child(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid")

    size: int


class Parent(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid")

    name: str
    children: list[Child] = []


def _errors(data):
    with pytest.raises(pydantic.ValidationError) as cm:
        Parent.model_validate(data)
    return cm.value.errors()


def test_missing_field():
    result = format_pydantic_errors(_errors({}), file_name="some.yaml")

    assert result == "Bad some.yaml content:\n- field 'name' required in top-level configuration"


def test_nested_errors():
    errors = _errors({"name": "x", "children": [{"size": 1}, {"size": 2, "color": "red"}, {}]})
    result = format_pydantic_errors(errors, file_name="some.yaml")

    assert result == (
        "Bad some.yaml content:\n"
        "- extra field 'color' not permitted in 'children[1]' configuration\n"
        "- field 'size' required in 'children[2]' configuration"
    )


def test_other_error():
    result = format_pydantic_errors(_errors({"name": "x", "children": "many"}), file_name="a.yaml")

    assert result == "Bad a.yaml content:\n- Input should be a valid list in field 'children'"

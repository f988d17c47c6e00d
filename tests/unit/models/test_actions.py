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
"""Tests for the actions model."""
import pytest

from charmreader.errors import MetadataError
from charmreader.models import ActionSpec, JujuActions


def test_actions_complete():
    actions = JujuActions.unmarshal(
        {
            "actions": {
                "snapshot": {
                    "description": "Take a snapshot.",
                    "params": {"outfile": {"type": "string"}},
                    "required": ["outfile"],
                    "execution-group": "backups",
                    "parallel": True,
                    "additionalProperties": False,
                },
                "restart": None,
            }
        }
    )

    snapshot = actions.actions["snapshot"]
    assert snapshot.description == "Take a snapshot."
    assert snapshot.params == {"outfile": {"type": "string"}}
    assert snapshot.required == ["outfile"]
    assert snapshot.execution_group == "backups"
    assert snapshot.parallel is True
    assert actions.actions["restart"] == ActionSpec()


@pytest.mark.parametrize("actions", [None, {}])
def test_actions_empty(actions):
    assert JujuActions.unmarshal({"actions": actions}).actions == {}


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("class", "'class' is a reserved keyword and cannot be used as an action name"),
        ("1st", "'1st' is not a valid action name"),
        ("do it", "'do it' is not a valid action name"),
        (42, "42 is not a valid action name"),
    ],
)
def test_actions_invalid_name(name, message):
    with pytest.raises(MetadataError) as cm:
        JujuActions.unmarshal({"actions": {name: {"description": "x"}}})
    assert str(cm.value) == f"Bad actions.yaml content:\n- {message} in field 'actions'"


def test_actions_not_a_mapping():
    with pytest.raises(MetadataError, match="actions.yaml is not a valid actions configuration"):
        JujuActions.unmarshal({"actions": ["snapshot"]})

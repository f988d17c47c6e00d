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

"""Juju Actions pydantic model."""

import keyword
import re
from typing import Any

import pydantic

from charmreader import const
from charmreader.models.base import DocumentModel

ACTION_NAME_REGEX = re.compile(r"^[a-zA-Z_][a-zA-Z0-9-_]*$")


class ActionSpec(DocumentModel):
    """A single action definition.

    Parameters are a JSON schema and are kept as given.
    """

    model_config = pydantic.ConfigDict(extra="allow")

    description: pydantic.StrictStr = ""
    params: dict[str, Any] = {}
    required: list[pydantic.StrictStr] = []
    execution_group: pydantic.StrictStr = ""
    parallel: pydantic.StrictBool = False


class JujuActions(DocumentModel):
    """Juju actions for charms.

    See also: https://juju.is/docs/sdk/actions
    """

    file_name = const.JUJU_ACTIONS_FILENAME

    actions: dict[str, ActionSpec] = {}

    @pydantic.field_validator("actions", mode="before")
    @classmethod
    def validate_actions(cls, actions: Any) -> Any:
        """Verify actions names."""
        if actions is None:
            return {}
        if not isinstance(actions, dict):
            raise ValueError("actions.yaml is not a valid actions configuration")
        for action, spec in actions.items():
            if not isinstance(action, str):
                raise ValueError(f"{action!r} is not a valid action name")
            if keyword.iskeyword(action):
                raise ValueError(
                    f"'{action}' is a reserved keyword and cannot be used as an action name"
                )
            if ACTION_NAME_REGEX.match(action) is None:
                raise ValueError(f"'{action}' is not a valid action name")
        return {action: {} if spec is None else spec for action, spec in actions.items()}

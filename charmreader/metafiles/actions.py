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

"""Handle a charm's actions.yaml file."""

from craft_cli import emit

from charmreader import const
from charmreader.metafiles import read_yaml
from charmreader.models.actions import JujuActions


def parse_actions(content: bytes) -> JujuActions:
    """Parse a charm's actions.yaml.

    :returns: a JujuActions object.

    :raises MetadataError: if actions.yaml is not valid.
    """
    actions = read_yaml(content, const.JUJU_ACTIONS_FILENAME)
    emit.debug(f"Validating {const.JUJU_ACTIONS_FILENAME}")
    return JujuActions.unmarshal({"actions": actions})

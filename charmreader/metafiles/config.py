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

"""Handle a charm's config.yaml file."""

from craft_cli import emit

from charmreader import const
from charmreader.metafiles import read_yaml
from charmreader.models.config import JujuConfig


def parse_config(content: bytes) -> JujuConfig:
    """Parse a charm's config.yaml.

    :returns: a JujuConfig object; an empty document gives an empty config.

    :raises MetadataError: if config.yaml is not valid.
    """
    config = read_yaml(content, const.JUJU_CONFIG_FILENAME)
    if config is None:
        return JujuConfig()

    emit.debug(f"Validating {const.JUJU_CONFIG_FILENAME}")
    return JujuConfig.unmarshal(config)

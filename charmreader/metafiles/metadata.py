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

"""Handlers for metadata.yaml file."""

from craft_cli import emit

from charmreader import const
from charmreader.metafiles import read_yaml
from charmreader.models.metadata import CharmMeta


def parse_metadata(content: bytes) -> CharmMeta:
    """Parse a charm's metadata.yaml.

    :returns: a CharmMeta object.

    :raises MetadataError: if metadata.yaml is not valid.
    """
    metadata = read_yaml(content, const.METADATA_FILENAME)
    emit.debug("Validating metadata keys")
    return CharmMeta.unmarshal(metadata)

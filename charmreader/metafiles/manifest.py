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

"""Charm manifest.yaml related functionality."""

from craft_cli import emit

from charmreader import const
from charmreader.metafiles import read_yaml
from charmreader.models.manifest import Manifest


def parse_manifest(content: bytes) -> Manifest:
    """Parse a charm's manifest.yaml.

    An empty document gives a manifest with no bases at all.

    :returns: a Manifest object.

    :raises MetadataError: if manifest.yaml does not follow the schema.
    :raises NotValidError: if one of its bases is not valid.
    """
    manifest = read_yaml(content, const.MANIFEST_FILENAME)
    emit.debug("Validating manifest bases")
    return Manifest.from_raw(manifest)

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

"""Parsers for each of the documents a charm may carry.

Every parser receives the raw content of the entry, so the same code serves
charm archives and charm directories.
"""

from typing import Any

import yaml
from craft_cli import emit

from charmreader.errors import MetadataError

__all__ = [
    "actions",
    "config",
    "lxd_profile",
    "manifest",
    "metadata",
    "metrics",
    "revision",
    "read_yaml",
]


def read_yaml(content: bytes, file_name: str) -> Any:
    """Decode the YAML content of a charm entry.

    :returns: the YAML decoded content
    :raises MetadataError: if the content is not valid YAML.
    """
    emit.debug(f"Decoding {file_name!r}")
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise MetadataError(
            f"Cannot parse the {file_name} file: {exc}", file_name=file_name
        ) from exc

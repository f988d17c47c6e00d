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

"""Resources declared in a charm's metadata."""
import dataclasses
from typing import Any

from charmreader import const
from charmreader.errors import MetadataError, NotValidError


@dataclasses.dataclass(frozen=True)
class ResourceMeta:
    """A resource as declared in metadata.yaml.

    ``path`` is where the resource gets stored, relative to a directory
    assigned to the resource in the unit's data directory; for example a
    resource "eggs" with path "eggs.tgz" in application "spam" ends up in
    ``/var/lib/juju/agent/spam-0/resources/eggs/eggs.tgz``. For OCI images
    it holds the image reference.
    """

    name: str
    type: const.ResourceType | None = None
    path: str = ""
    comment: str = ""

    def validate(self) -> None:
        """Check the resource declaration, stopping at the first problem.

        :raises NotValidError: describing the first check that failed.
        """
        if not self.name:
            raise NotValidError("resource missing name")
        if self.type is None:
            raise NotValidError("resource missing type")
        try:
            const.ResourceType(self.type)
        except ValueError as err:
            raise NotValidError(f"invalid resource type {self.type!r}: {err}") from err
        if not self.path:
            raise NotValidError("resource missing filename")
        if self.type == const.ResourceType.FILE and "/" in self.path:
            raise NotValidError(f'filename cannot contain "/" (got {self.path!r})')


def _get_str(raw: dict[str, Any], key: str, resource_name: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MetadataError(
            f"resource {resource_name!r}: {key!r} must be a string, got {value!r}",
            file_name=const.METADATA_FILENAME,
        )
    return value


def parse_resource(name: str, raw: Any) -> ResourceMeta:
    """Build a ResourceMeta from the raw value under ``resources.<name>``.

    An absent value gives a resource that only carries its name.

    :raises MetadataError: if the value is not a mapping or the type is unknown.
    """
    if raw is None:
        return ResourceMeta(name=name)
    if not isinstance(raw, dict):
        raise MetadataError(
            f"resource {name!r} must be a mapping, got {raw!r}",
            file_name=const.METADATA_FILENAME,
        )

    resource_type = None
    type_str = _get_str(raw, "type", name)
    if type_str:
        try:
            resource_type = const.ResourceType(type_str)
        except ValueError as err:
            raise MetadataError(
                f"resource {name!r}: unsupported resource type {type_str!r}",
                file_name=const.METADATA_FILENAME,
            ) from err

    # "description" is what newer metadata uses for the comment
    comment = _get_str(raw, "comment", name) or _get_str(raw, "description", name)
    return ResourceMeta(
        name=name,
        type=resource_type,
        path=_get_str(raw, "filename", name),
        comment=comment,
    )

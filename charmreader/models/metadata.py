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
"""Charm metadata pydantic model."""

import re
from typing import Any, Literal

import pydantic

from charmreader import const
from charmreader.errors import NotValidError
from charmreader.models.base import DocumentModel
from charmreader.models.resource import ResourceMeta, parse_resource

CHARM_NAME_REGEX = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]*[a-z][a-z0-9]*)*$")


class Relation(DocumentModel):
    """A relation endpoint, as declared under provides, requires or peers."""

    model_config = pydantic.ConfigDict(extra="allow")

    interface: pydantic.StrictStr
    limit: pydantic.StrictInt | None = None
    optional: pydantic.StrictBool = False
    scope: Literal["global", "container"] = const.RELATION_SCOPE_GLOBAL


class CharmMeta(DocumentModel):
    """The metadata.yaml of a charm.

    Keys not modelled here are kept as extra fields so they survive a
    marshal round trip.

    specs: https://juju.is/docs/sdk/metadata-yaml
    """

    file_name = const.METADATA_FILENAME
    model_config = pydantic.ConfigDict(extra="allow")

    name: pydantic.StrictStr
    display_name: pydantic.StrictStr | None = None
    summary: pydantic.StrictStr = ""
    description: pydantic.StrictStr = ""
    maintainers: list[pydantic.StrictStr] | None = None
    subordinate: pydantic.StrictBool = False
    series: list[pydantic.StrictStr] = []
    provides: dict[str, Relation] = {}
    requires: dict[str, Relation] = {}
    peers: dict[str, Relation] = {}
    extra_bindings: dict[str, Any] | None = None
    storage: dict[str, Any] = {}
    devices: dict[str, Any] | None = None
    containers: dict[str, Any] = {}
    resources: dict[str, pydantic.InstanceOf[ResourceMeta]] = {}
    terms: list[pydantic.StrictStr] | None = None
    tags: list[pydantic.StrictStr] | None = None
    min_juju_version: pydantic.StrictStr | None = None
    assumes: list[Any] | None = None

    @pydantic.model_validator(mode="before")
    @classmethod
    def _convert_maintainer(cls, data: Any) -> Any:
        """Convert the undocumented "maintainer" to documented "maintainers"."""
        if not isinstance(data, dict) or "maintainer" not in data:
            return data
        if "maintainers" in data:
            raise ValueError("Cannot specify both 'maintainer' and 'maintainers'")
        data = dict(data)
        data["maintainers"] = [data.pop("maintainer")]
        return data

    @pydantic.field_validator("provides", "requires", "peers", mode="before")
    @classmethod
    def _expand_relations(cls, relations: Any) -> Any:
        """Expand the ``name: interface`` shorthand into a full relation."""
        if relations is None:
            return {}
        if not isinstance(relations, dict):
            return relations
        return {
            name: {"interface": rel} if isinstance(rel, str) else rel
            for name, rel in relations.items()
        }

    @pydantic.field_validator("series", mode="before")
    @classmethod
    def _no_duplicated_series(cls, series: Any) -> Any:
        if series is None:
            return []
        # non strings are left for the schema to reject
        if isinstance(series, list) and all(isinstance(item, str) for item in series):
            return list(dict.fromkeys(series))
        return series

    @pydantic.field_validator("resources", mode="before")
    @classmethod
    def _parse_resources(cls, resources: Any) -> Any:
        if resources is None:
            return {}
        if not isinstance(resources, dict):
            raise ValueError("resources must be a mapping")
        return {name: parse_resource(name, raw) for name, raw in resources.items()}

    def relations(self) -> dict[str, Relation]:
        """All the relations of the charm, whatever their role."""
        return {**self.provides, **self.requires, **self.peers}

    def hooks(self) -> frozenset[str]:
        """Names of all the hooks this charm may implement."""
        hooks = set(const.UNIT_HOOKS)
        for relation_name in self.relations():
            hooks.update(relation_name + suffix for suffix in const.RELATION_HOOK_SUFFIXES)
        for storage_name in self.storage:
            hooks.update(storage_name + suffix for suffix in const.STORAGE_HOOK_SUFFIXES)
        for container_name in self.containers:
            hooks.update(container_name + suffix for suffix in const.CONTAINER_HOOK_SUFFIXES)
        return frozenset(hooks)

    def check(self, charm_format: const.CharmFormat) -> None:
        """Cross-check the metadata for the given charm format.

        :raises NotValidError: on the first inconsistency found.
        """
        if not self.name:
            raise NotValidError("charm metadata without a name")
        if not CHARM_NAME_REGEX.match(self.name):
            raise NotValidError(f"invalid charm name {self.name!r}")

        if charm_format == const.CharmFormat.V1:
            for series in self.series:
                if not series or "/" in series:
                    raise NotValidError(f"charm {self.name!r} declares invalid series {series!r}")
        elif self.series:
            raise NotValidError(
                f"charm {self.name!r} declares series but has format {charm_format}",
                resolution=f"Declare the supported bases in {const.MANIFEST_FILENAME} instead.",
            )

        self._check_relations()

        for key, resource in self.resources.items():
            if resource.name != key:
                raise NotValidError(f"mismatch on resource name ({resource.name!r} != {key!r})")
            resource.validate()

    def _check_relations(self) -> None:
        seen: set[str] = set()
        for role, relations in (
            ("provides", self.provides),
            ("requires", self.requires),
            ("peers", self.peers),
        ):
            for name, relation in relations.items():
                if name == const.RESERVED_RELATION_NAME or name.startswith(
                    const.RESERVED_RELATION_PREFIX
                ):
                    raise NotValidError(
                        f"charm {self.name!r} using a reserved relation name: {name!r}"
                    )
                if name in seen:
                    raise NotValidError(
                        f"charm {self.name!r} using a duplicated relation name: {name!r}"
                    )
                if not relation.interface:
                    raise NotValidError(f"relation {name!r} in {role!r} has an empty interface")
                if role == "provides" and relation.interface.startswith(
                    const.RESERVED_RELATION_NAME
                ):
                    raise NotValidError(
                        f"charm {self.name!r} relation {name!r} using a reserved interface: "
                        f"{relation.interface!r}"
                    )
                seen.add(name)

        if self.subordinate and not any(
            relation.scope == const.RELATION_SCOPE_CONTAINER for relation in self.requires.values()
        ):
            raise NotValidError(
                f"subordinate charm {self.name!r} lacks \"requires\" relation with container scope"
            )

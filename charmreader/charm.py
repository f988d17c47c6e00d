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

"""The charm aggregate shared by charm archives and charm directories."""

import abc
import dataclasses
import pathlib
from collections.abc import Callable, Sequence
from typing import TypeVar

from craft_cli import emit

from charmreader import const
from charmreader.errors import (
    CharmFileNotFoundError,
    MetadataError,
    MissingPlatformError,
    UnsupportedPlatformError,
)
from charmreader.metafiles.actions import parse_actions
from charmreader.metafiles.config import parse_config
from charmreader.metafiles.lxd_profile import parse_lxd_profile
from charmreader.metafiles.manifest import parse_manifest
from charmreader.metafiles.metadata import parse_metadata
from charmreader.metafiles.metrics import parse_metrics
from charmreader.metafiles.revision import parse_revision, parse_version
from charmreader.models import (
    CharmMeta,
    CharmMetrics,
    JujuActions,
    JujuConfig,
    LXDProfile,
    Manifest,
)

T = TypeVar("T")

# Get the content of a charm entry by name; raises CharmFileNotFoundError if missing.
EntryReader = Callable[[str], bytes]


@dataclasses.dataclass(frozen=True)
class CharmContents:
    """All the documents read from a charm.

    ``manifest`` is None when the charm has no manifest.yaml at all, which is
    what makes it a legacy (v1) charm.
    """

    meta: CharmMeta
    manifest: Manifest | None
    config: JujuConfig
    metrics: CharmMetrics | None
    actions: JujuActions
    lxd_profile: LXDProfile
    revision: int
    version: str


def _read_optional(
    read_entry: EntryReader,
    file_name: str,
    parser: Callable[[bytes], T],
    default: Callable[[], T],
) -> T:
    """Parse an entry that may be missing, falling back to a default if it is."""
    try:
        content = read_entry(file_name)
    except CharmFileNotFoundError:
        emit.debug(f"No {file_name!r} in charm, using the default")
        return default()
    return parser(content)


def read_contents(read_entry: EntryReader) -> CharmContents:
    """Read and parse all the documents of a charm.

    metadata.yaml is mandatory, every other document is optional. A missing
    optional document is replaced by its default, but a document that is
    present and broken makes the whole read fail.

    :raises MetadataError: if metadata.yaml is missing or any document is malformed.
    :raises NotValidError: if the manifest declares an invalid base.
    :raises CharmArchiveError: if an entry cannot be read.
    """
    try:
        metadata_content = read_entry(const.METADATA_FILENAME)
    except CharmFileNotFoundError as err:
        raise MetadataError(
            f"Charm has no {const.METADATA_FILENAME} file.",
            file_name=const.METADATA_FILENAME,
            resolution=f"Ensure the charm includes a valid {const.METADATA_FILENAME}.",
        ) from err
    meta = parse_metadata(metadata_content)

    return CharmContents(
        meta=meta,
        manifest=_read_optional(
            read_entry, const.MANIFEST_FILENAME, parse_manifest, lambda: None
        ),
        config=_read_optional(read_entry, const.JUJU_CONFIG_FILENAME, parse_config, JujuConfig),
        metrics=_read_optional(
            read_entry, const.JUJU_METRICS_FILENAME, parse_metrics, lambda: None
        ),
        actions=_read_optional(
            read_entry, const.JUJU_ACTIONS_FILENAME, parse_actions, JujuActions
        ),
        revision=_read_optional(read_entry, const.REVISION_FILENAME, parse_revision, int),
        lxd_profile=_read_optional(
            read_entry, const.LXD_PROFILE_FILENAME, parse_lxd_profile, LXDProfile
        ),
        version=_read_optional(read_entry, const.VERSION_FILENAME, parse_version, str),
    )


class Charm(abc.ABC):
    """A charm read from disk.

    Charms are either archives (CharmArchive) or directories (CharmDir); both
    expose the same documents. Every instance owns its documents: reading the
    same source twice gives two independent, equal charms.
    """

    def __init__(self, contents: CharmContents, path: pathlib.Path | None = None):
        self._contents = contents
        self._revision = contents.revision
        self.path = path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Charm) or type(self) is not type(other):
            return NotImplemented
        return (
            self.path == other.path
            and self._contents == other._contents
            and self._revision == other._revision
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.meta.name!r} path={str(self.path)!r}>"

    @property
    def meta(self) -> CharmMeta:
        """The charm's metadata.yaml."""
        return self._contents.meta

    @property
    def manifest(self) -> Manifest | None:
        """The charm's manifest.yaml, None if the charm has none."""
        return self._contents.manifest

    @property
    def config(self) -> JujuConfig:
        """The charm's config.yaml."""
        return self._contents.config

    @property
    def metrics(self) -> CharmMetrics | None:
        """The charm's metrics.yaml, None if the charm has none."""
        return self._contents.metrics

    @property
    def actions(self) -> JujuActions:
        """The charm's actions.yaml."""
        return self._contents.actions

    @property
    def lxd_profile(self) -> LXDProfile:
        """The charm's lxd-profile.yaml."""
        return self._contents.lxd_profile

    @property
    def version(self) -> str:
        """The VCS version the charm was built from, if recorded."""
        return self._contents.version

    @property
    def revision(self) -> int:
        """The charm revision number."""
        return self._revision

    def set_revision(self, revision: int) -> None:
        """Override the revision number.

        This also sets the revision written out when the charm gets expanded.
        """
        self._revision = revision

    @property
    def format(self) -> const.CharmFormat:
        """The metadata format of the charm.

        Charms shipping a manifest.yaml are v2, even if it lists no bases.
        """
        if self.manifest is None:
            return const.CharmFormat.V1
        return const.CharmFormat.V2

    def computed_platforms(self) -> list[str]:
        """The platforms this charm supports, see ``computed_platforms``."""
        return computed_platforms(self)

    @abc.abstractmethod
    def inventory(self) -> set[str]:
        """Get the paths of every entry in the charm, plus the revision file."""


def computed_platforms(charm: Charm) -> list[str]:
    """Get the platforms a charm supports.

    Legacy charms list their series in metadata.yaml. For the rest, each base
    in the manifest is rendered as a string, keeping the first appearance of
    each and the order in which they are declared.
    """
    if charm.format == const.CharmFormat.V1:
        return list(charm.meta.series)

    assert charm.manifest is not None
    platforms: list[str] = []
    seen: set[str] = set()
    for base in charm.manifest.bases or ():
        platform = str(base)
        if platform not in seen:
            seen.add(platform)
            platforms.append(platform)
    return platforms


def resolve_platform(requested: str, supported: Sequence[str]) -> str:
    """Get the platform to use for a charm.

    If nothing is requested, the first platform the charm supports is used.
    If the charm declares no platforms, the requested one is used as is.

    :raises MissingPlatformError: if nothing was requested and the charm declares nothing.
    :raises UnsupportedPlatformError: if the requested platform is not supported.
    """
    if not supported:
        if not requested:
            raise MissingPlatformError()
        return requested
    if not requested:
        return supported[0]
    if requested in supported:
        return requested
    raise UnsupportedPlatformError(requested, supported)

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

"""Constants used in charmreader."""
import enum

# region Environment variables
LOG_PATH_ENV_VAR = "CHARMREADER_LOG_PATH"
OUTPUT_FORMAT_ENV_VAR = "CHARMREADER_FORMAT"
OUTPUT_FORMATS = ("json", "table")
# endregion
# region Charm entries
METADATA_FILENAME = "metadata.yaml"
MANIFEST_FILENAME = "manifest.yaml"
JUJU_CONFIG_FILENAME = "config.yaml"
JUJU_METRICS_FILENAME = "metrics.yaml"
JUJU_ACTIONS_FILENAME = "actions.yaml"
LXD_PROFILE_FILENAME = "lxd-profile.yaml"
REVISION_FILENAME = "revision"
VERSION_FILENAME = "version"

# Hooks directory name
HOOKS_DIRNAME = "hooks"
# endregion


class CharmFormat(enum.IntEnum):
    """Metadata dialect of a charm.

    V1 charms declare their supported series in metadata.yaml; V2 charms ship a
    manifest.yaml listing bases.
    """

    V1 = 1
    V2 = 2

    def __str__(self) -> str:
        return f"v{self.value}"


class PlatformName(str, enum.Enum):
    """An operating system family a base may refer to."""

    UBUNTU = "ubuntu"
    WINDOWS = "windows"
    CENTOS = "centos"
    OPENSUSE = "opensuse"
    GENERIC_LINUX = "genericlinux"
    OSX = "osx"

    def __str__(self) -> str:
        return str(self.value)


SUPPORTED_PLATFORMS = frozenset(platform.value for platform in PlatformName)


class ChannelRisk(str, enum.Enum):
    """Risk level of a channel."""

    STABLE = "stable"
    CANDIDATE = "candidate"
    BETA = "beta"
    EDGE = "edge"

    def __str__(self) -> str:
        return str(self.value)


CHANNEL_RISKS = frozenset(risk.value for risk in ChannelRisk)


class ResourceType(str, enum.Enum):
    """Kind of artifact a charm resource refers to."""

    FILE = "file"
    OCI_IMAGE = "oci-image"

    def __str__(self) -> str:
        return str(self.value)


# region Hooks
UNIT_HOOKS = frozenset(
    (
        "install",
        "start",
        "config-changed",
        "upgrade-charm",
        "stop",
        "remove",
        "update-status",
        "leader-elected",
        "leader-settings-changed",
        "collect-metrics",
        "meter-status-changed",
        "pre-series-upgrade",
        "post-series-upgrade",
        "secret-changed",
        "secret-expired",
        "secret-remove",
        "secret-rotate",
        "start-upgrade",
    )
)
RELATION_HOOK_SUFFIXES = (
    "-relation-created",
    "-relation-joined",
    "-relation-changed",
    "-relation-departed",
    "-relation-broken",
)
STORAGE_HOOK_SUFFIXES = (
    "-storage-attached",
    "-storage-detaching",
)
CONTAINER_HOOK_SUFFIXES = ("-pebble-ready",)
# endregion

# Relation names reserved to Juju itself
RESERVED_RELATION_NAME = "juju"
RESERVED_RELATION_PREFIX = "juju-"
RELATION_SCOPE_GLOBAL = "global"
RELATION_SCOPE_CONTAINER = "container"

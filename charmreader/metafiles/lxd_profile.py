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

"""Handle a charm's lxd-profile.yaml file."""

from craft_cli import emit

from charmreader import const
from charmreader.metafiles import read_yaml
from charmreader.models.lxd_profile import LXDProfile


def parse_lxd_profile(content: bytes) -> LXDProfile:
    """Parse a charm's lxd-profile.yaml.

    The profile is not checked against what charms may set, see
    ``LXDProfile.validate_config_devices`` for that.

    :raises MetadataError: if lxd-profile.yaml is not valid.
    """
    profile = read_yaml(content, const.LXD_PROFILE_FILENAME)
    if profile is None:
        return LXDProfile()

    emit.debug(f"Validating {const.LXD_PROFILE_FILENAME}")
    return LXDProfile.unmarshal(profile)

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
"""Tests for the LXD profile model."""
import pytest

from charmreader.errors import MetadataError, NotValidError
from charmreader.models import LXDProfile


def test_empty_profile():
    profile = LXDProfile.unmarshal({"config": None, "devices": None})

    assert profile.is_empty()
    profile.validate_config_devices()


def test_profile_allowed():
    profile = LXDProfile.unmarshal(
        {
            "description": "Allow nesting",
            "config": {"security.nesting": "true"},
            "devices": {"tun": {"path": "/dev/net/tun", "type": "unix-char"}},
        }
    )

    assert not profile.is_empty()
    profile.validate_config_devices()


def test_profile_boot_config():
    profile = LXDProfile(config={"boot.autostart": "true"})
    with pytest.raises(NotValidError) as cm:
        profile.validate_config_devices()
    assert str(cm.value) == "invalid lxd-profile.yaml: contains config value 'boot.autostart'"


def test_profile_device_type():
    profile = LXDProfile(devices={"root": {"type": "disk", "path": "/"}})
    with pytest.raises(NotValidError) as cm:
        profile.validate_config_devices()
    assert str(cm.value) == "invalid lxd-profile.yaml: device 'root' has type 'disk'"


def test_profile_unknown_key():
    with pytest.raises(MetadataError) as cm:
        LXDProfile.unmarshal({"profiles": []})
    assert "extra field 'profiles' not permitted in top-level configuration" in str(cm.value)

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
"""Tests for the manifest model."""
import pytest

from charmreader.errors import MetadataError, NotValidError
from charmreader.models import Base, Channel, Manifest


def test_from_raw_absent():
    """No content at all means no bases were provided."""
    assert Manifest.from_raw(None) == Manifest(bases=None)


def test_from_raw_no_bases_key():
    """A manifest without bases is still a manifest, just with none of them."""
    manifest = Manifest.from_raw({"charmcraft-version": "3.0"})
    assert manifest.bases == ()


def test_from_raw_empty_bases():
    manifest = Manifest.from_raw({"bases": []})
    assert manifest.bases == ()
    assert manifest != Manifest.from_raw(None)


def test_from_raw_complete():
    raw = {
        "bases": [
            {"name": "ubuntu", "channel": "22.04", "architectures": ["amd64"]},
            {"name": "centos", "channel": "edge"},
            {"name": "osx"},
        ]
    }
    manifest = Manifest.from_raw(raw)
    assert manifest.bases == (
        Base(name="ubuntu", channel=Channel(track="22.04")),
        Base(name="centos", channel=Channel(risk="edge")),
        Base(name="osx"),
    )


@pytest.mark.parametrize(
    "raw",
    [
        {"bases": [{"name": "solaris", "channel": "11"}]},
        {"bases": [{"name": "ubuntu", "channel": "22.04"}, {"name": "plan9"}]},
        {"bases": [{"name": "Ubuntu"}], "whatever": {"else": True}},
    ],
)
def test_from_raw_unknown_platform(raw):
    """An unknown platform name always fails, whatever else is in there."""
    with pytest.raises(MetadataError) as cm:
        Manifest.from_raw(raw)
    assert cm.value.file_name == "manifest.yaml"
    assert str(cm.value).startswith("Bad manifest.yaml content:")


def test_from_raw_channel_not_string():
    """Unquoted numeric channels are decoded as floats and rejected."""
    with pytest.raises(MetadataError):
        Manifest.from_raw({"bases": [{"name": "ubuntu", "channel": 22.04}]})


def test_from_raw_bad_channel():
    with pytest.raises(MetadataError) as cm:
        Manifest.from_raw({"bases": [{"name": "ubuntu", "channel": "22.04/wild"}]})
    assert str(cm.value) == "parsing channel '22.04/wild': risk in channel '22.04/wild' not valid"


def test_from_raw_base_without_name():
    with pytest.raises(NotValidError) as cm:
        Manifest.from_raw({"bases": [{"channel": "22.04"}]})
    assert str(cm.value) == "base without name not valid"


@pytest.mark.parametrize("raw", [["ubuntu"], "ubuntu", 42])
def test_from_raw_not_a_mapping(raw):
    with pytest.raises(MetadataError) as cm:
        Manifest.from_raw(raw)
    assert str(cm.value) == "The manifest.yaml file does not contain a YAML mapping."


def test_from_raw_bases_not_a_list():
    with pytest.raises(MetadataError):
        Manifest.from_raw({"bases": "ubuntu"})


@pytest.mark.parametrize(
    "manifest",
    [
        Manifest(bases=None),
        Manifest(bases=()),
        Manifest(bases=(Base(name="ubuntu", channel=Channel(track="22.04")),)),
    ],
)
def test_validate_ok(manifest):
    manifest.validate()


def test_validate_fails_on_first_invalid_base():
    manifest = Manifest(
        bases=(Base(name="ubuntu"), Base(name="solaris"), Base(name="")),
    )
    with pytest.raises(NotValidError) as cm:
        manifest.validate()
    assert str(cm.value) == "invalid base"
    assert cm.value.details == "solaris: os 'solaris' not valid"

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
"""Tests for charms stored as directories."""
import sys
import zipfile

import pytest

from charmreader import const
from charmreader.archive import CharmArchive
from charmreader.directory import CharmDir
from charmreader.errors import CharmArchiveError, MetadataError
from charmreader.models import JujuConfig


def test_from_path(build_charm_dir, simple_charm_entries):
    entries = {
        name: value[0] if isinstance(value, tuple) else value
        for name, value in simple_charm_entries.items()
    }
    charm_dir = build_charm_dir(entries)

    charm = CharmDir.from_path(charm_dir)

    assert charm.path == charm_dir
    assert charm.meta.name == "test-charm"
    assert charm.format == const.CharmFormat.V2
    assert charm.computed_platforms() == ["ubuntu/22.04", "ubuntu/20.04/stable"]
    assert charm.config.defaults() == {"port": 80}
    assert charm.version == "abc1234"


def test_from_path_only_metadata(build_charm_dir):
    charm_dir = build_charm_dir({const.METADATA_FILENAME: "name: test-charm\n"})

    charm = CharmDir.from_path(charm_dir)

    assert charm.format == const.CharmFormat.V1
    assert charm.config == JujuConfig()
    assert charm.revision == 0


def test_from_path_missing_metadata(build_charm_dir):
    charm_dir = build_charm_dir({const.JUJU_CONFIG_FILENAME: "options: {}\n"})

    with pytest.raises(MetadataError) as cm:
        CharmDir.from_path(charm_dir)
    assert str(cm.value) == "Charm has no metadata.yaml file."


def test_from_path_broken_config(build_charm_dir):
    charm_dir = build_charm_dir(
        {const.METADATA_FILENAME: "name: test-charm\n", const.JUJU_CONFIG_FILENAME: "[\n"}
    )

    with pytest.raises(MetadataError):
        CharmDir.from_path(charm_dir)


def test_from_path_entry_is_a_directory(build_charm_dir):
    """An entry that cannot be read is not taken as missing."""
    charm_dir = build_charm_dir({const.METADATA_FILENAME: "name: test-charm\n"})
    (charm_dir / const.JUJU_CONFIG_FILENAME).mkdir()

    with pytest.raises(CharmArchiveError):
        CharmDir.from_path(charm_dir)


def test_inventory(build_charm_dir):
    charm_dir = build_charm_dir(
        {
            const.METADATA_FILENAME: "name: test-charm\n",
            "src/charm.py": "",
            "hooks/install": "",
        }
    )
    charm = CharmDir.from_path(charm_dir)

    assert charm.inventory() == {
        "metadata.yaml",
        "src",
        "src/charm.py",
        "hooks",
        "hooks/install",
        "revision",
    }


@pytest.mark.skipif(sys.platform == "win32", reason="Windows not [yet] supported")
def test_inventory_unreadable(build_charm_dir):
    charm_dir = build_charm_dir({const.METADATA_FILENAME: "name: test-charm\n"})
    charm = CharmDir.from_path(charm_dir)
    charm_dir.rename(charm_dir.with_name("moved"))

    with pytest.raises(CharmArchiveError):
        charm.inventory()


def test_archive_to(build_charm_dir, tmp_path):
    charm_dir = build_charm_dir(
        {
            const.METADATA_FILENAME: "name: test-charm\n",
            const.REVISION_FILENAME: "3\n",
            "src/charm.py": "print('hi')\n",
        }
    )
    charm = CharmDir.from_path(charm_dir)
    charm.set_revision(12)

    zip_path = charm.archive_to(tmp_path / "packed.charm")

    with zipfile.ZipFile(zip_path) as zf:
        assert sorted(zf.namelist()) == ["metadata.yaml", "revision", "src/charm.py"]
        assert zf.read("revision") == b"12"

    archive = CharmArchive.from_path(zip_path)
    assert archive.meta == charm.meta
    assert archive.revision == 12
    assert archive.inventory() == charm.inventory() - {"src"}

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

import pathlib
import stat
import zipfile
from textwrap import dedent

import pytest

from charmreader import const

SIMPLE_METADATA = dedent(
    """\
    name: test-charm
    summary: A charm to test with.
    description: Nothing much to say.
    requires:
      db: mysql
    """
)

LEGACY_METADATA = dedent(
    """\
    name: legacy-charm
    summary: An old style charm.
    series:
      - bionic
      - focal
    """
)

SIMPLE_MANIFEST = dedent(
    """\
    analysis:
      attributes:
        - name: language
          result: python
    bases:
      - name: ubuntu
        channel: "22.04"
      - name: ubuntu
        channel: "20.04/stable"
    """
)


def _zip_info(name: str, mode: int | None) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name)
    if mode is not None:
        info.external_attr = mode << 16
    return info


@pytest.fixture
def build_charm_zip(tmp_path):
    """Build a charm zip file from a mapping of entry names to their content.

    Content may be a string, bytes or a (content, mode) tuple to set the
    permissions stored for the entry.
    """
    def _build(entries, name="test-charm.charm") -> pathlib.Path:
        zip_path = tmp_path / name
        with zipfile.ZipFile(zip_path, "w") as zf:
            for entry_name, value in entries.items():
                mode = None
                if isinstance(value, tuple):
                    value, mode = value
                zf.writestr(_zip_info(entry_name, mode), value)
        return zip_path

    return _build


@pytest.fixture
def build_charm_dir(tmp_path):
    """Build a charm directory from a mapping of relative paths to their content."""
    def _build(entries, name="test-charm") -> pathlib.Path:
        charm_dir = tmp_path / name
        charm_dir.mkdir()
        for entry_name, value in entries.items():
            path = charm_dir / entry_name
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(value, bytes):
                path.write_bytes(value)
            else:
                path.write_text(value)
        return charm_dir

    return _build


@pytest.fixture
def simple_charm_entries():
    """The entries of a v2 charm with one relation and one hook."""
    return {
        const.METADATA_FILENAME: SIMPLE_METADATA,
        const.MANIFEST_FILENAME: SIMPLE_MANIFEST,
        const.JUJU_CONFIG_FILENAME: "options:\n  port:\n    type: int\n    default: 80\n",
        const.JUJU_ACTIONS_FILENAME: "backup:\n  description: Back it up.\n",
        const.VERSION_FILENAME: "abc1234\n",
        "src/charm.py": ("print('hi')\n", stat.S_IFREG | 0o644),
        "hooks/install": ("#!/bin/sh\n", stat.S_IFREG | 0o644),
    }


@pytest.fixture
def simple_charm_zip(build_charm_zip, simple_charm_entries):
    return build_charm_zip(simple_charm_entries)

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
"""Tests for the 'platforms' command."""
import json
from argparse import Namespace

import pytest

from charmreader import const
from charmreader.commands.platforms import PlatformsCommand
from charmreader.errors import MissingPlatformError, UnsupportedPlatformError

MANIFEST = """\
bases:
  - name: ubuntu
    channel: "22.04"
  - name: ubuntu
    channel: "20.04"
  - name: ubuntu
    channel: "22.04"
"""


@pytest.fixture
def charm_zip(build_charm_zip):
    return build_charm_zip(
        {const.METADATA_FILENAME: "name: test-charm\n", const.MANIFEST_FILENAME: MANIFEST}
    )


def _args(path, platform=None, resolve=False, fmt=None):
    return Namespace(path=path, platform=platform, resolve=resolve, format=fmt)


def test_platforms_list(emitter, charm_zip):
    PlatformsCommand(None).run(_args(charm_zip))

    emitter.assert_messages(["ubuntu/22.04", "ubuntu/20.04"])


def test_platforms_json(emitter, charm_zip):
    PlatformsCommand(None).run(_args(charm_zip, fmt="json"))

    text = emitter.assert_message(r"\[.*\]", regex=True)
    assert json.loads(text) == ["ubuntu/22.04", "ubuntu/20.04"]


def test_platforms_table(emitter, charm_zip):
    PlatformsCommand(None).run(_args(charm_zip, fmt="table"))

    emitter.assert_message(r"platform\s+ubuntu/22.04\s+ubuntu/20.04", regex=True)


def test_platforms_resolve_default(emitter, charm_zip):
    PlatformsCommand(None).run(_args(charm_zip, resolve=True))

    emitter.assert_messages(["ubuntu/22.04"])


def test_platforms_requested(emitter, charm_zip):
    PlatformsCommand(None).run(_args(charm_zip, platform="ubuntu/20.04"))

    emitter.assert_messages(["ubuntu/20.04"])


def test_platforms_requested_unsupported(charm_zip):
    with pytest.raises(UnsupportedPlatformError) as cm:
        PlatformsCommand(None).run(_args(charm_zip, platform="ubuntu/18.04"))
    assert cm.value.supported == ["ubuntu/22.04", "ubuntu/20.04"]


def test_platforms_none_declared(emitter, build_charm_zip):
    zip_path = build_charm_zip({const.METADATA_FILENAME: "name: test-charm\n"})

    with pytest.raises(MissingPlatformError):
        PlatformsCommand(None).run(_args(zip_path, resolve=True))

    PlatformsCommand(None).run(_args(zip_path, platform="focal"))
    emitter.assert_messages(["focal"])

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

"""Read a charm from disk, whatever its shape."""

import pathlib
import stat

from craft_cli import emit

from charmreader import const
from charmreader.archive import CharmArchive
from charmreader.charm import Charm
from charmreader.directory import CharmDir
from charmreader.errors import CharmArchiveError
from charmreader.utils.file import PathOrString


def read_charm(path: PathOrString) -> Charm:
    """Read the charm in path, either a directory or a zip archive.

    The charm metadata is checked against the charm's format; a charm that
    fails that check is never returned.
    """
    path = pathlib.Path(path)
    try:
        mode = path.stat().st_mode
    except OSError as exc:
        raise CharmArchiveError(f"Cannot access {str(path)!r}: {exc!r}") from exc

    charm: Charm
    if stat.S_ISDIR(mode):
        emit.debug(f"Reading charm directory {str(path)!r}")
        charm = CharmDir.from_path(path)
    else:
        emit.debug(f"Reading charm archive {str(path)!r}")
        charm = CharmArchive.from_path(path)

    # a manifest without bases is checked as a legacy charm
    if charm.manifest and charm.manifest.bases:
        check_format = const.CharmFormat.V2
    else:
        check_format = const.CharmFormat.V1
    charm.meta.check(check_format)
    return charm

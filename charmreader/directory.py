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

"""Charms laid out as loose files in a directory."""

import os
import pathlib

from craft_cli import emit
from typing_extensions import Self

from charmreader import const
from charmreader.charm import Charm, read_contents
from charmreader.errors import CharmArchiveError, CharmFileNotFoundError
from charmreader.utils.file import PathOrString, build_zip


def _read_file(directory: pathlib.Path, name: str) -> bytes:
    """Get the content of a file in the charm directory.

    :raises CharmFileNotFoundError: if there is no such file.
    :raises CharmArchiveError: if the file cannot be read.
    """
    path = directory / name
    emit.debug(f"Reading {str(path)!r}")
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise CharmFileNotFoundError(name) from exc
    except OSError as exc:
        raise CharmArchiveError(f"Cannot read {str(path)!r}: {exc!r}") from exc


class CharmDir(Charm):
    """A charm stored as a directory tree."""

    path: pathlib.Path

    @classmethod
    def from_path(cls, path: PathOrString) -> Self:
        """Read the charm stored in the directory path."""
        path = pathlib.Path(path)
        contents = read_contents(lambda name: _read_file(path, name))
        return cls(contents, path)

    def inventory(self) -> set[str]:
        """Get the relative paths of every file and directory in the charm."""
        names = {const.REVISION_FILENAME}
        for dir_path, dir_names, file_names in os.walk(self.path, onerror=self._walk_error):
            relative = pathlib.Path(dir_path).relative_to(self.path)
            for name in dir_names + file_names:
                names.add((relative / name).as_posix())
        return names

    @staticmethod
    def _walk_error(exc: OSError) -> None:
        raise CharmArchiveError(f"Cannot list charm directory: {exc!r}") from exc

    def archive_to(self, zip_path: PathOrString) -> pathlib.Path:
        """Pack the charm directory into a zip file, including its revision.

        :returns: the path to the zip file.
        """
        zip_path = pathlib.Path(zip_path)
        emit.progress(f"Packing {str(self.path)!r} into {str(zip_path)!r}")
        try:
            build_zip(
                zip_path,
                self.path,
                extra_entries={const.REVISION_FILENAME: str(self.revision)},
            )
        except OSError as exc:
            raise CharmArchiveError(f"Cannot write {str(zip_path)!r}: {exc!r}") from exc
        return zip_path

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
"""File-related utilities."""
import os
import pathlib
import zipfile
from collections.abc import Mapping

from craft_cli import CraftError

PathOrString = os.PathLike | str


def useful_path(path: PathOrString) -> pathlib.Path:
    """Return a valid Path with username expansion for path.

    CraftError is raised if path does not exist or is not readable.
    """
    path = pathlib.Path(path).expanduser()
    if not os.access(path, os.R_OK):
        raise CraftError(f"Cannot access {str(path)!r}.")
    return path


def useful_filepath(filepath: PathOrString) -> pathlib.Path:
    """Return a valid Path with username expansion for filepath.

    CraftError is raised if filepath is not a valid file or is not readable.
    """
    filepath = useful_path(filepath)
    if not filepath.is_file():
        raise CraftError(f"{str(filepath)!r} is not a file.")
    return filepath


def build_zip(
    zip_path: PathOrString,
    source_dir: PathOrString,
    *,
    extra_entries: Mapping[str, str] | None = None,
) -> None:
    """Build a zip file from a directory.

    :param zip_path: The path to the output zip file
    :param source_dir: The path to the directory to zip.
    :param extra_entries: Text entries to add, replacing files with the same name.
    """
    zip_path = pathlib.Path(zip_path).resolve()
    source_dir = pathlib.Path(source_dir).resolve()
    extra_entries = extra_entries or {}
    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zip_file:
        # Using os.walk() because Path.walk() is only added in 3.12
        for dir_path_str, _, filenames in os.walk(source_dir, followlinks=True):
            for filename in filenames:
                file_path = pathlib.Path(dir_path_str, filename)
                if file_path == zip_path:
                    continue
                arcname = file_path.relative_to(source_dir).as_posix()
                if arcname in extra_entries:
                    continue
                zip_file.write(file_path, arcname)
        for arcname, content in extra_entries.items():
            zip_file.writestr(arcname, content)

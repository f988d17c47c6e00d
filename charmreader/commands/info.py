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

"""Infrastructure for the 'info' command."""

import os
import pathlib
import textwrap

import humanize
from craft_cli import emit

from charmreader.charm import Charm
from charmreader.cmdbase import BaseCommand
from charmreader.errors import CharmArchiveError
from charmreader.reader import read_charm
from charmreader.utils.file import useful_path


def _size_error(exc: OSError) -> None:
    raise CharmArchiveError(f"Cannot get the size of the charm: {exc!r}") from exc


def _disk_size(path: pathlib.Path) -> int:
    """Bytes used by the charm on disk, adding up files for directories.

    :raises CharmArchiveError: if the charm cannot be walked or a file stat'ed.
    """
    try:
        if not path.is_dir():
            return path.stat().st_size
        total = 0
        for dir_path, _, filenames in os.walk(path, onerror=_size_error):
            for filename in filenames:
                file_path = pathlib.Path(dir_path, filename)
                if not file_path.is_symlink():
                    total += file_path.stat().st_size
    except OSError as exc:
        raise CharmArchiveError(f"Cannot get the size of {str(path)!r}: {exc!r}") from exc
    return total


def get_charm_info(charm: Charm) -> dict:
    """Summarize a charm in a structure ready to be serialized."""
    return {
        "name": charm.meta.name,
        "format": str(charm.format),
        "revision": charm.revision,
        "version": charm.version,
        "platforms": charm.computed_platforms(),
        "resources": [
            {
                "name": resource.name,
                "type": resource.type.value if resource.type else None,
                "path": resource.path,
            }
            for resource in charm.meta.resources.values()
        ],
    }


class InfoCommand(BaseCommand):
    """Show the main attributes of a charm."""

    name = "info"
    help_msg = "Show the main attributes of a charm"
    overview = textwrap.dedent(
        """
        Show the main attributes of a charm.

        The charm may be a packed charm file or a directory holding the
        charm's files. Its metadata is fully validated before anything is
        shown.
    """
    )

    def fill_parser(self, parser):
        """Add own parameters to the general parser."""
        self.include_format_option(parser)
        parser.add_argument("path", type=useful_path, help="The charm to inspect")

    def run(self, parsed_args):
        """Run the command."""
        charm = read_charm(parsed_args.path)
        info = get_charm_info(charm)

        if parsed_args.format == "json":
            emit.message(self.format_content(parsed_args.format, info))
            return
        if parsed_args.format == "table":
            rows = []
            for key, value in info.items():
                if key == "resources":
                    continue
                if isinstance(value, list):
                    value = ", ".join(value)
                rows.append({"attribute": key, "value": value})
            emit.message(self.format_content(parsed_args.format, rows))
            if info["resources"]:
                emit.message(self.format_content(parsed_args.format, info["resources"]))
            return

        size = humanize.naturalsize(_disk_size(parsed_args.path))
        emit.message(f"Name: {info['name']}")
        emit.message(f"Format: {info['format']}")
        emit.message(f"Revision: {info['revision']}")
        emit.message(f"Version: {info['version'] or '-'}")
        emit.message(f"Size: {size}")
        emit.message(f"Platforms: {', '.join(info['platforms']) or '-'}")
        if info["resources"]:
            emit.message("Resources:")
            for resource in info["resources"]:
                emit.message(f"- {resource['name']} ({resource['type']}): {resource['path']}")

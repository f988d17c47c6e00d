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

"""Infrastructure for the 'expand' command."""

import pathlib
import textwrap

from craft_cli import CraftError, emit

from charmreader.archive import CharmArchive
from charmreader.cmdbase import BaseCommand
from charmreader.reader import read_charm
from charmreader.utils.file import useful_filepath


class ExpandCommand(BaseCommand):
    """Expand a packed charm into a directory."""

    name = "expand"
    help_msg = "Expand a packed charm into a directory"
    overview = textwrap.dedent(
        """
        Expand a packed charm into a directory.

        Every file in the charm is extracted keeping its permissions, the
        hooks are made executable and a 'revision' file is written.

        If the expansion fails, the destination directory is left as it is
        and should be discarded.
    """
    )

    def fill_parser(self, parser):
        """Add own parameters to the general parser."""
        parser.add_argument("filepath", type=useful_filepath, help="The charm file to expand")
        parser.add_argument("destination", type=pathlib.Path, help="Where to expand the charm")
        parser.add_argument(
            "--revision",
            type=int,
            help="Revision to write, instead of the one the charm carries",
        )

    def run(self, parsed_args):
        """Run the command."""
        charm = read_charm(parsed_args.filepath)
        if not isinstance(charm, CharmArchive):
            raise CraftError(
                f"Cannot expand {str(parsed_args.filepath)!r}: not a packed charm."
            )
        if parsed_args.revision is not None:
            charm.set_revision(parsed_args.revision)

        emit.progress(f"Expanding charm {charm.meta.name!r}")
        charm.expand_to(parsed_args.destination)
        emit.message(
            f"Charm {charm.meta.name!r} expanded into {str(parsed_args.destination)!r} "
            f"(revision {charm.revision})."
        )

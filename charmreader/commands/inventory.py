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

"""Infrastructure for the 'inventory' command."""

import textwrap

from craft_cli import emit

from charmreader.cmdbase import BaseCommand
from charmreader.reader import read_charm
from charmreader.utils.file import useful_path


class InventoryCommand(BaseCommand):
    """List the entries of a charm."""

    name = "inventory"
    help_msg = "List every entry in a charm"
    overview = textwrap.dedent(
        """
        List every entry in a charm, sorted.

        A 'revision' entry is always listed, as one is always written when
        the charm is expanded.
    """
    )

    def fill_parser(self, parser):
        """Add own parameters to the general parser."""
        self.include_format_option(parser)
        parser.add_argument("path", type=useful_path, help="The charm to list")

    def run(self, parsed_args):
        """Run the command."""
        charm = read_charm(parsed_args.path)
        entries = sorted(charm.inventory())

        if parsed_args.format == "json":
            emit.message(self.format_content(parsed_args.format, entries))
        elif parsed_args.format == "table":
            rows = [{"entry": entry} for entry in entries]
            emit.message(self.format_content(parsed_args.format, rows))
        else:
            for entry in entries:
                emit.message(entry)

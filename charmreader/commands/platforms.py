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

"""Infrastructure for the 'platforms' command."""

import textwrap

from craft_cli import emit

from charmreader.charm import resolve_platform
from charmreader.cmdbase import BaseCommand
from charmreader.reader import read_charm
from charmreader.utils.file import useful_path


class PlatformsCommand(BaseCommand):
    """Show the platforms a charm supports."""

    name = "platforms"
    help_msg = "Show the platforms a charm supports"
    overview = textwrap.dedent(
        """
        Show the platforms a charm supports.

        Legacy charms list the series in their metadata; the rest list the
        bases in their manifest, shown as NAME or NAME/CHANNEL.

        With --resolve, or when a platform is given with --platform, only
        the platform to use is shown: the given one if the charm supports
        it, or the first one the charm declares if none is given.
    """
    )

    def fill_parser(self, parser):
        """Add own parameters to the general parser."""
        self.include_format_option(parser)
        parser.add_argument("path", type=useful_path, help="The charm to inspect")
        parser.add_argument("--platform", help="The platform that would be requested")
        parser.add_argument(
            "--resolve",
            action="store_true",
            help="Only show the platform to use",
        )

    def run(self, parsed_args):
        """Run the command."""
        charm = read_charm(parsed_args.path)
        platforms = charm.computed_platforms()
        if parsed_args.resolve or parsed_args.platform:
            platforms = [resolve_platform(parsed_args.platform or "", platforms)]

        if parsed_args.format == "json":
            emit.message(self.format_content(parsed_args.format, platforms))
        elif parsed_args.format == "table":
            rows = [{"platform": platform} for platform in platforms]
            emit.message(self.format_content(parsed_args.format, rows))
        else:
            for platform in platforms:
                emit.message(platform)

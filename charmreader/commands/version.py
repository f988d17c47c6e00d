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

"""Infrastructure for the 'version' command."""

from craft_cli import emit

from charmreader import __version__
from charmreader.cmdbase import BaseCommand

_overview = """
Show charmreader version.

The output has the format X.Y.Z, where X, Y and Z are the major, minor and
patch version numbers, or "devel" when running from a source tree that was
not installed.
"""


class VersionCommand(BaseCommand):
    """Show the charmreader version."""

    name = "version"
    help_msg = "Show charmreader version"
    overview = _overview
    common = True

    def run(self, parsed_args):
        """Run the command."""
        emit.message(__version__)

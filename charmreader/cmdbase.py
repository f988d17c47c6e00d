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

"""Infrastructure for common base commands functionality."""

import craft_cli

from charmreader import const, env
from charmreader.utils.cli import format_content

FORMAT_HELP_STR = "Produce the result in the specified format ('json' or 'table')"


class BaseCommand(craft_cli.BaseCommand):
    """Subclass this to create a new command.

    The subclass must be declared in the corresponding section of main.COMMAND_GROUPS.

    If the command may produce the result in a programmatic-friendly format, it
    should call the 'include_format_option' method to properly affect the parser and
    then emit only one message with the result of the 'format_content' method.
    """

    def format_content(self, fmt, content):
        """Format the content."""
        return format_content(content, fmt)

    def include_format_option(self, parser):
        """Add the 'format' option to this parser.

        The default comes from the environment, if set there.
        """
        parser.add_argument(
            "--format",
            choices=const.OUTPUT_FORMATS,
            default=env.get_default_output_format(),
            help=FORMAT_HELP_STR,
        )

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
"""CLI-related utilities for charmreader."""
import enum
import json
from collections.abc import Iterable
from typing import Any

import tabulate


def humanize_list(items: Iterable[str], conjunction: str) -> str:
    """Format a list into a human-readable string.

    :param items: list to humanize, must not be empty
    :param conjunction: the conjunction used to join the final element to
                        the rest of the list (e.g. 'and').
    """
    items = list(items)
    if not items:
        raise ValueError("Cannot humanize an empty list.")
    *initials, final = map(repr, sorted(items))
    if not initials:
        return final
    return f"{', '.join(initials)} {conjunction} {final}"


class OutputFormat(enum.Enum):
    """Output format options for commands."""

    DEFAULT = None
    JSON = "json"
    TABLE = "table"


def format_content(content: Any, fmt: OutputFormat | str | None = None) -> str:
    """Format command output.

    Tables expect a list of rows, each one a dict from column title to value.
    """
    if not isinstance(fmt, OutputFormat):
        try:
            fmt = OutputFormat(fmt)
        except ValueError:
            raise ValueError(f"Unknown output format {str(fmt)}")

    if fmt == OutputFormat.JSON:
        return json.dumps(content, indent=4)
    if fmt == OutputFormat.TABLE:
        return tabulate.tabulate(content, headers="keys", tablefmt="plain")
    return str(content)

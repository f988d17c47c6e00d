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

"""Handle the plain text revision and version files."""

import re

from charmreader import const
from charmreader.errors import InvalidRevisionError, MetadataError

# leading decimal integer of the first token, ASCII digits only
REVISION_REGEX = re.compile(r"[+-]?[0-9]+")


def parse_revision(content: bytes) -> int:
    """Get the revision number from the content of a revision file.

    Only the leading integer of the first token counts; anything after it
    is ignored.

    :raises InvalidRevisionError: if the first token does not start with an integer.
    """
    try:
        text = content.decode("utf8")
    except UnicodeDecodeError as exc:
        raise InvalidRevisionError() from exc

    tokens = text.split(maxsplit=1)
    if not tokens:
        raise InvalidRevisionError(text)
    match = REVISION_REGEX.match(tokens[0])
    if match is None:
        raise InvalidRevisionError(text)
    return int(match.group())


def parse_version(content: bytes) -> str:
    """Get the VCS version descriptor from the content of a version file.

    :returns: the first line, without surrounding whitespace.

    :raises MetadataError: if the content is not UTF-8 text.
    """
    try:
        text = content.decode("utf8")
    except UnicodeDecodeError as exc:
        raise MetadataError(
            f"The {const.VERSION_FILENAME} file is not valid UTF-8 text.",
            file_name=const.VERSION_FILENAME,
        ) from exc
    first_line, _, _ = text.partition("\n")
    return first_line.strip()

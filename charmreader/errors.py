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
"""Charmreader error classes."""

from collections.abc import Sequence

from craft_cli import CraftError


class CharmFileNotFoundError(CraftError):
    """An entry is not present in the charm.

    Readers absorb this error for the optional entries and substitute a default.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Charm file {path!r} not found")


class CharmArchiveError(CraftError):
    """The charm container could not be opened or read."""


class MetadataError(CraftError):
    """A charm document exists but could not be decoded or coerced."""

    def __init__(self, message: str, *, file_name: str | None = None, **kwargs):
        self.file_name = file_name
        super().__init__(message, **kwargs)


class InvalidRevisionError(MetadataError):
    """The revision entry does not hold an integer."""

    def __init__(self, content: str | None = None):
        details = None if content is None else f"Content: {content!r}"
        super().__init__("invalid revision file", file_name="revision", details=details)


class NotValidError(CraftError):
    """A parsed value fails a semantic check."""


class MissingPlatformError(NotValidError):
    """No platform was requested and the charm does not declare any."""

    def __init__(self):
        super().__init__(
            "platform not specified and charm does not define any",
            resolution="Specify the platform to use explicitly.",
            reportable=False,
        )


class UnsupportedPlatformError(NotValidError):
    """The requested platform is not one the charm supports."""

    def __init__(self, requested: str, supported: Sequence[str]):
        self.requested = requested
        self.supported = list(supported)
        super().__init__(
            f"platform {requested!r} not supported by charm, "
            f"supported platforms are: {','.join(self.supported)}",
            reportable=False,
        )


class ExpansionError(CraftError):
    """The charm could not be expanded into a directory.

    The target directory may hold a partial expansion and must be discarded.
    """

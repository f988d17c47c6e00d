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

"""Platforms a charm can declare support for.

A base is an operating system family plus an optional channel. Channels have
the shape ``[<track>/]<risk>`` or just ``<track>``, e.g. ``22.04/stable``,
``edge`` or ``7``.
"""
import dataclasses

from typing_extensions import Self

from charmreader import const
from charmreader.errors import NotValidError


@dataclasses.dataclass(frozen=True)
class Channel:
    """A release channel: a track, a risk, or both."""

    track: str | None = None
    risk: str | None = None

    @classmethod
    def parse(cls, text: str) -> Self:
        """Build a channel from its string form.

        :raises NotValidError: if the string is not a well formed channel.
        """
        if not text:
            raise NotValidError("empty channel not valid")

        parts = text.split("/")
        track = risk = None
        if len(parts) == 1:
            if parts[0] in const.CHANNEL_RISKS:
                risk = parts[0]
            else:
                track = parts[0]
        elif len(parts) == 2:
            track, risk = parts
        else:
            raise NotValidError(f"channel is malformed and has too many components {text!r}")

        channel = cls(track=track, risk=risk)
        channel.validate()
        return channel

    def validate(self) -> None:
        """Verify the channel is well formed.

        :raises NotValidError: on an empty channel, an empty track or an unknown risk.
        """
        if self.track is None and self.risk is None:
            raise NotValidError("empty channel not valid")
        if self.risk is not None and self.risk not in const.CHANNEL_RISKS:
            raise NotValidError(f"risk in channel {str(self)!r} not valid")
        if self.track is not None and (not self.track or "/" in self.track):
            raise NotValidError(f"track in channel {str(self)!r} not valid")

    def __str__(self) -> str:
        if self.track is None:
            return self.risk or ""
        if self.risk is None:
            return self.track
        return f"{self.track}/{self.risk}"


@dataclasses.dataclass(frozen=True)
class Base:
    """A supported platform: operating system name and optional channel."""

    name: str | None = None
    channel: Channel | None = None

    def validate(self) -> None:
        """Verify the base refers to a known platform.

        :raises NotValidError: if the name is missing or unknown, or the channel is invalid.
        """
        if not self.name:
            raise NotValidError("base without name not valid")
        if self.name not in const.SUPPORTED_PLATFORMS:
            raise NotValidError(f"os {self.name!r} not valid")
        if self.channel is not None:
            self.channel.validate()

    def __str__(self) -> str:
        if self.channel is None:
            return self.name or ""
        return f"{self.name}/{self.channel}"

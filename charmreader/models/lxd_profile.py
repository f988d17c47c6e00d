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

"""LXD profile pydantic model."""
from typing import Any

import pydantic

from charmreader import const
from charmreader.errors import NotValidError
from charmreader.models.base import DocumentModel

ALLOWED_DEVICE_TYPES = frozenset(("unix-char", "unix-block", "gpu", "usb", "nic"))


class LXDProfile(DocumentModel):
    """The lxd-profile.yaml of a charm, applied to machines hosting its units."""

    file_name = const.LXD_PROFILE_FILENAME

    config: dict[str, pydantic.StrictStr] = {}
    description: pydantic.StrictStr = ""
    devices: dict[str, dict[str, pydantic.StrictStr]] = {}

    @pydantic.field_validator("config", "devices", mode="before")
    @classmethod
    def _empty_mapping(cls, value: Any) -> Any:
        return {} if value is None else value

    def is_empty(self) -> bool:
        """Tell if the profile would change nothing."""
        return not self.config and not self.devices

    def validate_config_devices(self) -> None:
        """Check the profile only uses what charms are allowed to set.

        :raises NotValidError: on the first forbidden config key or device type.
        """
        for key in self.config:
            if key.startswith("boot"):
                raise NotValidError(f"invalid {self.file_name}: contains config value {key!r}")
        for name, device in self.devices.items():
            device_type = device.get("type")
            if device_type is not None and device_type not in ALLOWED_DEVICE_TYPES:
                raise NotValidError(
                    f"invalid {self.file_name}: device {name!r} has type {device_type!r}"
                )

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

"""Expose needed names at main package level."""

import importlib.metadata
import os


def _get_version():
    if os.getenv("SNAP_NAME") == "charmreader":
        return os.getenv("SNAP_VERSION")
    try:
        return importlib.metadata.version("charmreader")
    except importlib.metadata.PackageNotFoundError:
        return "devel"


__version__ = _get_version()

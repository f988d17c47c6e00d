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

"""Collection of utilities for charmreader."""

from charmreader.utils.cli import OutputFormat, format_content, humanize_list
from charmreader.utils.file import build_zip, useful_filepath, useful_path

__all__ = [
    "OutputFormat",
    "format_content",
    "humanize_list",
    "build_zip",
    "useful_filepath",
    "useful_path",
]

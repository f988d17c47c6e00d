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
"""Charmreader environment utilities."""
import os
import pathlib

from craft_cli import CraftError

from charmreader import const
from charmreader.utils.cli import humanize_list


def get_log_filepath() -> pathlib.Path | None:
    """Path for the charmreader log, if one was set in the environment.

    When None, craft-cli picks its own location for the log file.
    """
    log_path = os.getenv(const.LOG_PATH_ENV_VAR)
    if not log_path:
        return None
    return pathlib.Path(log_path).expanduser().resolve()


def get_default_output_format() -> str | None:
    """Output format to use when the command line does not specify one.

    :raises CraftError: if the environment holds an unknown format.
    """
    fmt = os.getenv(const.OUTPUT_FORMAT_ENV_VAR) or None
    if fmt is not None and fmt not in const.OUTPUT_FORMATS:
        raise CraftError(
            f"Invalid output format {fmt!r} in {const.OUTPUT_FORMAT_ENV_VAR}.",
            resolution=f"Use {humanize_list(const.OUTPUT_FORMATS, 'or')}.",
        )
    return fmt

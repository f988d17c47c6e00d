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
import pathlib

import pytest
from craft_cli import CraftError

from charmreader import const, env


def test_get_log_filepath_unset(monkeypatch):
    monkeypatch.delenv(const.LOG_PATH_ENV_VAR, raising=False)

    assert env.get_log_filepath() is None


def test_get_log_filepath(monkeypatch, tmp_path):
    monkeypatch.setenv(const.LOG_PATH_ENV_VAR, str(tmp_path / "some.log"))

    assert env.get_log_filepath() == (tmp_path / "some.log").resolve()


def test_get_log_filepath_home_expanded(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv(const.LOG_PATH_ENV_VAR, "~/charmreader.log")

    assert env.get_log_filepath() == pathlib.Path(tmp_path, "charmreader.log").resolve()


@pytest.mark.parametrize(("value", "result"), [(None, None), ("", None), ("json", "json")])
def test_get_default_output_format(monkeypatch, value, result):
    if value is None:
        monkeypatch.delenv(const.OUTPUT_FORMAT_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(const.OUTPUT_FORMAT_ENV_VAR, value)

    assert env.get_default_output_format() == result


def test_get_default_output_format_invalid(monkeypatch):
    monkeypatch.setenv(const.OUTPUT_FORMAT_ENV_VAR, "xml")

    with pytest.raises(CraftError):
        env.get_default_output_format()

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

"""Main entry point module for all the tool functionality."""

import os
import platform
import sys

from craft_cli import (
    ArgumentParsingError,
    CommandGroup,
    CraftError,
    Dispatcher,
    EmitterMode,
    ProvideHelpException,
    emit,
)

from charmreader import __version__, env
from charmreader.commands import expand, info, inventory, platforms, version

# the summary of the whole program
GENERAL_SUMMARY = """
Charmreader reads packed charms and charm directories.

It validates the charm's metadata, shows what the charm is made of and the
platforms it supports, and expands packed charms onto disk.
"""

# Collect commands in different groups, for easier human consumption. Order here is
# important when listing commands and showing help.
_inspect_commands = [
    info.InfoCommand,
    inventory.InventoryCommand,
    platforms.PlatformsCommand,
]
_other_commands = [
    expand.ExpandCommand,
    version.VersionCommand,
]
COMMAND_GROUPS = [
    CommandGroup("Inspect", _inspect_commands),
    CommandGroup("Other", _other_commands),
]


def _get_system_details():
    """Produce details about the system."""
    useful_env = {
        name: value for name, value in os.environ.items() if name.startswith("CHARMREADER")
    }
    env_string = ", ".join(f"{name}={value!r}" for name, value in sorted(useful_env.items()))
    if not env_string:
        env_string = "None"
    return f"System details: {platform.platform()}; Environment: {env_string}"


def _emit_error(error, cause=None):
    """Emit the error in a centralized way so we can alter it consistently."""
    if cause is not None:
        error.__cause__ = cause
    emit.error(error)


def _run(argv):
    """Dispatch the command line, returning the process exit code."""
    try:
        dispatcher = Dispatcher("charmreader", COMMAND_GROUPS, summary=GENERAL_SUMMARY)
        dispatcher.pre_parse_args(argv)
        dispatcher.load_command(None)
        emit.debug(_get_system_details())
        retcode = dispatcher.run()

    except ArgumentParsingError as err:
        print(err, file=sys.stderr)  # to stderr, as argparse normally does
        emit.ended_ok()
        retcode = 1
    except ProvideHelpException as err:
        print(err, file=sys.stderr)  # to stderr, as argparse normally does
        emit.ended_ok()
        retcode = 0
    except CraftError as err:
        _emit_error(err)
        retcode = err.retcode
    except KeyboardInterrupt as exc:
        error = CraftError("Interrupted.")
        _emit_error(error, cause=exc)
        retcode = 1
    except Exception as err:
        error = CraftError(f"charmreader internal error: {err!r}")
        _emit_error(error, cause=err)
        retcode = 1
    else:
        emit.ended_ok()
        if retcode is None:
            retcode = 0

    return retcode


def main(argv=None):
    """Provide the main entry point.

    The emitter lives exactly as long as this call: it is initialised here and
    always ended before returning.
    """
    if argv is None:
        argv = sys.argv[1:]

    emit.init(
        EmitterMode.BRIEF,
        "charmreader",
        f"Starting charmreader version {__version__}",
        log_filepath=env.get_log_filepath(),
    )
    return _run(argv)


if __name__ == "__main__":
    sys.exit(main())

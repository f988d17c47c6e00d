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

"""Charms packed as zip archives.

The archive is never kept open: every operation opens it, does its work and
closes it, whatever the outcome.
"""

import abc
import functools
import io
import os
import pathlib
import posixpath
import shutil
import stat
import zipfile
import zlib
from typing import BinaryIO

from craft_cli import emit
from typing_extensions import Self

from charmreader import const
from charmreader.charm import Charm, CharmContents, read_contents
from charmreader.errors import CharmArchiveError, CharmFileNotFoundError, ExpansionError
from charmreader.utils.file import PathOrString

# errors the zip module raises on corrupted content
_ZIP_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError)
# errors reading an encrypted entry or one with an unsupported compression
_ZIP_ENTRY_ERRORS = (*_ZIP_ERRORS, RuntimeError, NotImplementedError)


class _SectionReader(io.RawIOBase):
    """Expose the first ``size`` bytes of a seekable binary stream.

    The position is tracked here, so the stream may be shared with others.
    """

    def __init__(self, fileobj: BinaryIO, size: int):
        super().__init__()
        self._fileobj = fileobj
        self._size = size
        self._pos = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def tell(self) -> int:
        return self._pos

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            pos = offset
        elif whence == io.SEEK_CUR:
            pos = self._pos + offset
        elif whence == io.SEEK_END:
            pos = self._size + offset
        else:
            raise ValueError(f"invalid whence ({whence!r})")
        if pos < 0:
            raise ValueError(f"negative seek position {pos}")
        self._pos = pos
        return pos

    def readinto(self, buffer) -> int:
        remaining = self._size - self._pos
        if remaining <= 0:
            return 0
        self._fileobj.seek(self._pos)
        data = self._fileobj.read(min(len(buffer), remaining))
        size = len(data)
        buffer[:size] = data
        self._pos += size
        return size


class ZipOpener(abc.ABC):
    """Know how to open the zip file of a charm archive."""

    @abc.abstractmethod
    def _open(self) -> zipfile.ZipFile:
        """Open the zip file, letting the zip module errors through."""

    @abc.abstractmethod
    def describe(self) -> str:
        """Describe where the archive comes from, for error messages."""

    def open_zip(self) -> zipfile.ZipFile:
        """Open the zip file; the caller must close it.

        :raises CharmArchiveError: if the archive cannot be opened.
        """
        emit.trace(f"Opening charm archive from {self.describe()}")
        try:
            return self._open()
        except (OSError, *_ZIP_ERRORS) as exc:
            raise CharmArchiveError(
                f"Cannot open charm archive from {self.describe()}: {exc!r}"
            ) from exc


class PathZipOpener(ZipOpener):
    """Open a charm archive stored in a file."""

    def __init__(self, path: pathlib.Path):
        self.path = path

    def _open(self) -> zipfile.ZipFile:
        return zipfile.ZipFile(self.path)

    def describe(self) -> str:
        return repr(str(self.path))


class BytesZipOpener(ZipOpener):
    """Open a charm archive held in memory."""

    def __init__(self, data: bytes):
        self.data = data

    def _open(self) -> zipfile.ZipFile:
        return zipfile.ZipFile(io.BytesIO(self.data))

    def describe(self) -> str:
        return f"{len(self.data)} bytes in memory"


class ReaderZipOpener(ZipOpener):
    """Open a charm archive from a seekable binary stream of a known size.

    The stream belongs to the caller, who must keep it open while the charm
    archive is used.
    """

    def __init__(self, fileobj: BinaryIO, size: int):
        self.fileobj = fileobj
        self.size = size

    def _open(self) -> zipfile.ZipFile:
        return zipfile.ZipFile(_SectionReader(self.fileobj, self.size))

    def describe(self) -> str:
        return f"a stream of {self.size} bytes"


def _read_entry(zip_file: zipfile.ZipFile, name: str) -> bytes:
    """Get the content of an entry in the zip file.

    :raises CharmFileNotFoundError: if there is no entry with that exact name.
    :raises CharmArchiveError: if the entry cannot be read.
    """
    for info in zip_file.infolist():
        if info.filename == name:
            break
    else:
        raise CharmFileNotFoundError(name)

    emit.debug(f"Reading {name!r} from charm archive")
    try:
        return zip_file.read(info)
    except (OSError, *_ZIP_ENTRY_ERRORS) as exc:
        raise CharmArchiveError(f"Cannot read {name!r} from charm archive: {exc!r}") from exc


def _ensure_inside(root: pathlib.Path, path: pathlib.Path, name: str) -> None:
    """Verify that path, once resolved, lives inside root."""
    resolved = path.resolve()
    if resolved != root and root not in resolved.parents:
        raise ExpansionError(f"Cannot extract {name!r} outside the target directory.")


def _extract_all(zip_file: zipfile.ZipFile, root: pathlib.Path) -> None:
    """Extract every entry of the zip file into root, keeping file modes and symlinks.

    The zip module's extractall does not keep modes nor symlinks
    (see https://bugs.python.org/issue15795).
    """
    root.mkdir(parents=True, exist_ok=True)
    root = root.resolve()
    for info in zip_file.infolist():
        name = info.filename
        if posixpath.isabs(name):
            raise ExpansionError(f"Cannot extract {name!r} outside the target directory.")
        destination = root / name
        _ensure_inside(root, destination.parent, name)
        mode = info.external_attr >> 16

        if info.is_dir():
            destination.mkdir(parents=True, exist_ok=True)
            continue

        destination.parent.mkdir(parents=True, exist_ok=True)
        if stat.S_ISLNK(mode):
            link_target = zip_file.read(info).decode("utf8")
            if posixpath.isabs(link_target):
                raise ExpansionError(f"Cannot extract symlink {name!r} to {link_target!r}.")
            _ensure_inside(root, destination.parent / link_target, name)
            if destination.is_symlink() or destination.exists():
                destination.unlink()
            os.symlink(link_target, destination)
            continue

        _ensure_inside(root, destination, name)
        with zip_file.open(info) as source, destination.open("wb") as sink:
            shutil.copyfileobj(source, sink)
        permissions = stat.S_IMODE(mode)
        if permissions:
            destination.chmod(permissions)


def fix_hooks(hooks_dir: pathlib.Path, hook_names: frozenset[str]) -> None:
    """Make sure the hooks are owner-executable.

    Only regular files directly under hooks_dir are considered.
    """
    try:
        entries = os.scandir(hooks_dir)
    except (FileNotFoundError, NotADirectoryError):
        emit.debug(f"No {const.HOOKS_DIRNAME!r} directory to fix")
        return

    with entries:
        for entry in entries:
            if entry.name not in hook_names or not entry.is_file(follow_symlinks=False):
                continue
            mode = entry.stat(follow_symlinks=False).st_mode
            if not mode & stat.S_IXUSR:
                emit.debug(f"Making hook {entry.name!r} executable")
                os.chmod(entry.path, stat.S_IMODE(mode) | stat.S_IXUSR)


def write_revision(directory: pathlib.Path, revision: int) -> None:
    """Write the revision file into directory, flushed to disk."""
    with (directory / const.REVISION_FILENAME).open("w", encoding="utf8") as fh:
        fh.write(str(revision))
        fh.flush()
        os.fsync(fh.fileno())


class CharmArchive(Charm):
    """A charm packed in a zip archive."""

    def __init__(
        self,
        opener: ZipOpener,
        contents: CharmContents,
        path: pathlib.Path | None = None,
    ):
        super().__init__(contents, path)
        self._opener = opener

    @classmethod
    def _read(cls, opener: ZipOpener, path: pathlib.Path | None = None) -> Self:
        with opener.open_zip() as zip_file:
            contents = read_contents(functools.partial(_read_entry, zip_file))
        return cls(opener, contents, path)

    @classmethod
    def from_path(cls, path: PathOrString) -> Self:
        """Read the charm archive stored in path."""
        path = pathlib.Path(path)
        return cls._read(PathZipOpener(path), path)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Read a charm archive from its content.

        Make sure the archive fits in memory before using this.
        """
        return cls._read(BytesZipOpener(data))

    @classmethod
    def from_reader(cls, fileobj: BinaryIO, size: int) -> Self:
        """Read a charm archive from a seekable binary stream holding size bytes.

        The caller is responsible for closing fileobj; methods on the returned
        charm archive may fail after that.
        """
        return cls._read(ReaderZipOpener(fileobj, size))

    def inventory(self) -> set[str]:
        """Get the paths of every entry in the archive.

        A revision file is always included since one is always written when
        expanding, and the root directory entry is never included.
        """
        with self._opener.open_zip() as zip_file:
            names = {posixpath.normpath(name) for name in zip_file.namelist()}
        names.add(const.REVISION_FILENAME)
        names.discard(".")
        return names

    def expand_to(self, target: PathOrString) -> None:
        """Expand the charm archive into target, creating it if necessary.

        Hooks get fixed to be owner-executable and the revision file is
        written. If anything fails the process is aborted, leaving whatever
        was already extracted in place.

        :raises ExpansionError: if the charm could not be fully expanded.
        """
        target = pathlib.Path(target)
        emit.debug(f"Expanding charm into {str(target)!r}")
        try:
            with self._opener.open_zip() as zip_file:
                _extract_all(zip_file, target)
            fix_hooks(target / const.HOOKS_DIRNAME, self.meta.hooks())
            write_revision(target, self.revision)
        except (OSError, UnicodeDecodeError, *_ZIP_ENTRY_ERRORS) as exc:
            raise ExpansionError(f"Cannot expand charm into {str(target)!r}: {exc!r}") from exc
        except CharmArchiveError as exc:
            raise ExpansionError(f"Cannot expand charm into {str(target)!r}: {exc}") from exc

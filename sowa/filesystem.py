"""Virtual file system that maps URL-like schemes to file servers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Dict, List, Optional, Union

PathArg = Union[str, "os.PathLike[str]"]

_SCHEME_SEPARATOR = "://"


def _as_str(path: PathArg) -> str:
    return path if isinstance(path, str) else os.fspath(path)


def _split_nonempty(text: str, delimiter: str) -> List[str]:
    return [part for part in text.split(delimiter) if part]


class FileData:
    """File contents held in memory.

    A static file keeps fixed contents that ``data`` and ``size()`` report,
    while its ``buffer`` stays a separate, writable byte array.
    """

    def __init__(self, buffer: bytes = b"") -> None:
        self.buffer = bytearray(buffer)
        self._static: Optional[bytes] = None

    @classmethod
    def new_static(cls, data: bytes) -> FileData:
        file_data = cls()
        file_data._static = bytes(data)
        return file_data

    @property
    def dynamic(self) -> bool:
        return self._static is None

    @property
    def data(self) -> bytes:
        if self._static is None:
            return bytes(self.buffer)
        return self._static

    def size(self) -> int:
        if self._static is None:
            return len(self.buffer)
        return len(self._static)

    def __bytes__(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class FileEntry:
    """One entry of a directory listing; entries order by path."""

    path: str = ""
    is_directory: bool = False

    def __lt__(self, other: FileEntry) -> bool:
        if not isinstance(other, FileEntry):
            return NotImplemented
        return self.path < other.path


@dataclass
class PathData:
    scheme: str = ""
    path: str = ""


class FileServer(ABC):
    """Serves files for one scheme."""

    @abstractmethod
    def load(self, path: PathArg) -> Optional[FileData]:
        """Return the file contents, or None when the file cannot be read."""

    def read_directory(self, path: PathArg) -> List[FileEntry]:
        return []


class SaveableFileServer(ABC):
    """A file server that files can be written to."""

    @abstractmethod
    def open_save_stream(self, path: PathArg) -> IO[str]:
        """Open a text stream for writing the file at ``path``."""


class DataFileServer(FileServer):
    """Serves files registered in memory."""

    def __init__(self) -> None:
        self._files: Dict[str, FileData] = {}

    def add_file(self, path: str, data: FileData) -> DataFileServer:
        self._files[path] = data
        return self

    def load(self, path: PathArg) -> Optional[FileData]:
        return self._files.get(_as_str(path))


class FolderFileServer(FileServer, SaveableFileServer):
    """Serves files from a directory on disk."""

    def __init__(self, fs: FileSystem, scheme: str, path: PathArg) -> None:
        self._fs = fs
        self._scheme = scheme
        self._base_path = Path(path)

    @property
    def base_path(self) -> Path:
        return self._base_path

    def load(self, path: PathArg) -> Optional[FileData]:
        try:
            with open(self.get_path(path), "rb") as handle:
                return FileData(handle.read())
        except OSError:
            return None

    def read_directory(self, path: PathArg) -> List[FileEntry]:
        directory = self.get_path(path)
        if not directory.is_dir():
            return []
        entries = [
            FileEntry(
                path="{}://{}".format(
                    self._scheme,
                    Path(os.path.relpath(child, self._base_path)).as_posix(),
                ),
                is_directory=child.is_dir(),
            )
            for child in directory.iterdir()
        ]
        return sorted(entries, key=lambda entry: entry.path)

    def get_path(self, path: PathArg) -> Path:
        return self._base_path / _as_str(path)

    def open_save_stream(self, path: PathArg) -> IO[str]:
        resolved = self._fs.resolve_path(_as_str(path))
        return open(self.get_path(resolved.path), "w", encoding="utf-8")


class FileSystem:
    """Routes ``scheme://path`` requests to registered file servers."""

    def __init__(self) -> None:
        self._file_servers: Dict[str, Optional[FileServer]] = {}

    def register_file_server(self, scheme: str, server: Optional[FileServer]) -> None:
        self._file_servers[scheme] = server

    def get_file_server(self, scheme: str) -> Optional[FileServer]:
        return self._file_servers.get(scheme)

    def has_file_server(self, scheme: str) -> bool:
        return scheme in self._file_servers

    def resolve_path(self, path: PathArg) -> PathData:
        """Split ``scheme://path`` into its parts, dropping leading slashes of the path."""
        text = _as_str(path)
        parts = _split_nonempty(text, _SCHEME_SEPARATOR)
        result = PathData()
        if len(parts) == 2:
            result.scheme, result.path = parts
        elif len(parts) == 1:
            if text.startswith(_SCHEME_SEPARATOR):
                result.path = parts[0]
            else:
                result.scheme = parts[0]
        stripped = result.path.lstrip("/")
        if stripped:
            result.path = stripped
        return result

    def _server_for(self, data: PathData) -> Optional[FileServer]:
        return self._file_servers.get(data.scheme)

    def load(self, path: PathArg) -> Optional[FileData]:
        data = self.resolve_path(path)
        server = self._server_for(data)
        if server is None:
            return None
        return server.load(data.path)

    def read_directory(self, path: PathArg) -> List[FileEntry]:
        data = self.resolve_path(path)
        server = self._server_for(data)
        if server is None:
            return []
        return server.read_directory(data.path)

    def new_folder_file_server(self, scheme: str, path: PathArg) -> FolderFileServer:
        return FolderFileServer(self, scheme, path)

    def new_data_file_server(self) -> DataFileServer:
        return DataFileServer()
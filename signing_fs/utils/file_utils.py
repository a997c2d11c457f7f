"""File handling utilities for path and metadata queries."""
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path, PurePath
from typing import Iterable, Optional, Union

from signing_fs.utils.mtime import ModifiedTimeSetter, default_setter

PathLike = Union[str, os.PathLike]
Timestamp = Union[datetime, int, float]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NS_PER_SECOND = 1_000_000_000


def _to_ns(timestamp: Timestamp) -> int:
    """Convert a datetime or POSIX seconds value to integer nanoseconds."""
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.astimezone()  # naive values are local time
        delta = timestamp - _EPOCH
        return (delta.days * 86400 + delta.seconds) * _NS_PER_SECOND + delta.microseconds * 1000
    if isinstance(timestamp, int):
        return timestamp * _NS_PER_SECOND
    return int(round(timestamp * _NS_PER_SECOND))


def encode_name(file_name: Union[str, bytes]) -> Path:
    """Convert a file name into a native path using the filesystem encoding."""
    return Path(os.fsdecode(file_name))


def file_exists(path: PathLike) -> bool:
    """Check whether path resolves to a regular file."""
    return Path(path).is_file()


def modified_time(path: PathLike) -> datetime:
    """Get the last modification time of a file as an aware UTC datetime."""
    seconds, remainder = divmod(os.stat(path).st_mtime_ns, _NS_PER_SECOND)
    return _EPOCH + timedelta(seconds=seconds, microseconds=remainder // 1000)


def update_modified_time(
    path: PathLike,
    timestamp: Timestamp,
    setter: Optional[ModifiedTimeSetter] = None
) -> None:
    """Set the modification time of a file, keeping its access time."""
    setter = setter or default_setter()
    setter.set_modified_time(path, _to_ns(timestamp))


def file_extension(path: PathLike, extensions: Iterable[str]) -> bool:
    """Check whether the path's extension is one of the given extensions.

    Matching is case-insensitive and entries may carry a leading dot,
    so both ``"pdf"`` and ``".PDF"`` match ``report.pdf``.
    """
    suffix = PurePath(path).suffix
    if not suffix:
        return False
    ext = suffix[1:].lower()
    return any(ext == allowed.lstrip('.').lower() for allowed in extensions)


def file_size(path: PathLike) -> int:
    """Get the size of a file in bytes."""
    return os.stat(path).st_size


def file_name(path: PathLike) -> Optional[str]:
    """Get the final path segment, or None if there is none."""
    name = PurePath(path).name
    if not name or name == '..':
        return None
    return name


def directory(path: PathLike) -> Optional[str]:
    """Get the path without its final segment, or None if it has no parent."""
    pure = PurePath(path)
    if pure.parent == pure:
        return None
    return str(pure.parent)


def join_path(base: PathLike, relative: PathLike) -> Path:
    """Join a relative path onto a base directory."""
    return Path(base) / relative


def create_directory(path: PathLike) -> None:
    """Create a directory and any missing parents."""
    Path(path).mkdir(parents=True, exist_ok=True)

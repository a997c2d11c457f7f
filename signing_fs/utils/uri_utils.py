"""Conversion between local filesystem paths and file:// URIs.

POSIX paths are encoded from their raw filesystem bytes, so names that are
not valid UTF-8 survive the round trip. Windows paths are encoded as UTF-8
with drive paths mapped to ``file:///C:/...`` and UNC shares to
``file://server/share/...``.
"""
import os
import re
from pathlib import PureWindowsPath
from typing import Optional, Union
from urllib.parse import quote, quote_from_bytes, unquote, unquote_to_bytes, urlsplit

from signing_fs.utils.errors import InvalidInputError

PathLike = Union[str, os.PathLike]

_IS_WINDOWS = os.name == 'nt'
_LOCAL_HOSTS = ('', 'localhost')
_DRIVE_PATTERN = re.compile(r'^[A-Za-z]:(/|$)')


def to_uri_path(path: PathLike, windows: Optional[bool] = None) -> str:
    """Convert an absolute local path into a percent-encoded file:// URI."""
    if windows is None:
        windows = _IS_WINDOWS
    if windows:
        return _windows_path_to_uri(os.fsdecode(path))
    return _posix_path_to_uri(os.fsencode(path))


def from_uri_path(uri: str, windows: Optional[bool] = None) -> str:
    """Convert a file:// URI back into a local path string."""
    if windows is None:
        windows = _IS_WINDOWS
    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid URI: {uri!r}") from exc
    if not parts.scheme:
        raise InvalidInputError(f"Invalid URI: {uri!r}")
    if parts.scheme.lower() != 'file':
        raise InvalidInputError(f"Invalid URI path: unsupported scheme {parts.scheme!r}")

    if windows:
        return _windows_uri_to_path(parts.netloc, parts.path)
    return _posix_uri_to_path(parts.netloc, parts.path)


def _posix_path_to_uri(raw: bytes) -> str:
    if not raw.startswith(b'/'):
        raise InvalidInputError(f"Cannot convert relative path to URI: {os.fsdecode(raw)!r}")
    return 'file://' + quote_from_bytes(raw, safe='/')


def _posix_uri_to_path(netloc: str, path: str) -> str:
    if netloc.lower() not in _LOCAL_HOSTS:
        raise InvalidInputError(f"Invalid URI path: host {netloc!r} is not local")
    path = path or '/'
    if not path.startswith('/'):
        raise InvalidInputError(f"Invalid URI path: {path!r} is not absolute")
    return os.fsdecode(unquote_to_bytes(path))


def _windows_path_to_uri(path: str) -> str:
    pure = PureWindowsPath(path)
    if not pure.is_absolute():
        raise InvalidInputError(f"Cannot convert relative path to URI: {path!r}")
    posix = pure.as_posix()
    if _DRIVE_PATTERN.match(posix):
        return 'file:///' + posix[:2] + quote(posix[2:], safe='/')
    # UNC share, as_posix() yields //server/share/...
    return 'file:' + quote(posix, safe='/')


def _windows_uri_to_path(netloc: str, path: str) -> str:
    try:
        decoded = unquote(path, errors='strict')
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"Invalid URI path: {path!r} is not UTF-8") from exc

    if netloc.lower() not in _LOCAL_HOSTS:
        if not decoded.strip('/'):
            raise InvalidInputError(f"Invalid URI path: no share on host {netloc!r}")
        return str(PureWindowsPath('//' + netloc + decoded))

    decoded = decoded[1:] if decoded.startswith('/') else decoded
    if not _DRIVE_PATTERN.match(decoded):
        raise InvalidInputError(f"Invalid URI path: {path!r} has no drive letter")
    if len(decoded) == 2:
        decoded += '/'
    return str(PureWindowsPath(decoded))

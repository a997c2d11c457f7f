"""Platform backends for setting a file's modification time."""
import logging
import os
import stat
from abc import ABC, abstractmethod
from typing import Union

from signing_fs.config import settings

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class ModifiedTimeSetter(ABC):
    """Sets a modification time, relaxing permissions first where needed."""

    def set_modified_time(self, path: PathLike, mtime_ns: int) -> None:
        """Apply ``mtime_ns`` to ``path`` keeping its access time."""
        try:
            self.relax_permissions(path)
        except OSError as exc:
            logger.debug("Could not relax permissions on %s: %s", path, exc)
        atime_ns = os.stat(path).st_atime_ns
        os.utime(path, ns=(atime_ns, mtime_ns))

    @abstractmethod
    def relax_permissions(self, path: PathLike) -> None:
        """Make ``path`` owner read-write; failures are ignored by the caller."""
        raise NotImplementedError


class PosixModifiedTimeSetter(ModifiedTimeSetter):
    def relax_permissions(self, path: PathLike) -> None:
        mode = stat.S_IMODE(os.stat(path).st_mode)
        if mode & settings.OWNER_RW_MODE != settings.OWNER_RW_MODE:
            os.chmod(path, mode | settings.OWNER_RW_MODE)


class WindowsModifiedTimeSetter(ModifiedTimeSetter):
    def relax_permissions(self, path: PathLike) -> None:
        # Windows only honours the write bit, which clears the read-only attribute
        os.chmod(path, stat.S_IREAD | stat.S_IWRITE)


def default_setter() -> ModifiedTimeSetter:
    """Return the backend matching the host platform."""
    if os.name == "nt":
        return WindowsModifiedTimeSetter()
    return PosixModifiedTimeSetter()

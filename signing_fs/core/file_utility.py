"""Temporary path tracking and the FileUtility facade."""
import logging
import os
import shutil
import tempfile
import uuid
from collections import deque
from pathlib import Path
from typing import Deque, Optional, Tuple, Union

from signing_fs.config import settings
from signing_fs.utils import file_utils, hex_utils, uri_utils

logger = logging.getLogger(__name__)


class FileUtility:
    """Reserves uniquely named temp paths and removes them on cleanup.

    Stateless helpers are exposed as static methods, so the class also works
    as a plain toolkit without an instance. Use it as a context manager to
    get cleanup on every exit path:

        with FileUtility() as fu:
            target = fu.generate_temp_path()
            target.write_bytes(payload)
        # target removed here
    """

    encode_name = staticmethod(file_utils.encode_name)
    file_exists = staticmethod(file_utils.file_exists)
    modified_time = staticmethod(file_utils.modified_time)
    update_modified_time = staticmethod(file_utils.update_modified_time)
    file_extension = staticmethod(file_utils.file_extension)
    file_size = staticmethod(file_utils.file_size)
    file_name = staticmethod(file_utils.file_name)
    directory = staticmethod(file_utils.directory)
    join_path = staticmethod(file_utils.join_path)
    create_directory = staticmethod(file_utils.create_directory)
    to_uri_path = staticmethod(uri_utils.to_uri_path)
    from_uri_path = staticmethod(uri_utils.from_uri_path)
    hex_to_bytes = staticmethod(hex_utils.hex_to_bytes)

    def __init__(
        self,
        temp_dir: Optional[Union[str, os.PathLike]] = None,
        prefix: Optional[str] = None
    ):
        """Initialize the tracker with an empty pending list.

        ``temp_dir`` defaults to ``settings.TEMP_DIR`` and then to the
        system temp directory; ``prefix`` to ``settings.TEMP_FILE_PREFIX``.
        """
        self.temp_dir = Path(temp_dir or settings.TEMP_DIR or tempfile.gettempdir())
        self.prefix = settings.TEMP_FILE_PREFIX if prefix is None else prefix
        self._temp_files: Deque[Path] = deque()

    @property
    def pending_temp_paths(self) -> Tuple[Path, ...]:
        """Temp paths still owed cleanup, oldest first."""
        return tuple(self._temp_files)

    def generate_temp_path(self) -> Path:
        """Reserve a unique path in the temp directory without creating it."""
        temp_path = self.temp_dir / f"{self.prefix}{uuid.uuid4()}"
        self._temp_files.append(temp_path)
        logger.debug("Reserved temp path %s", temp_path)
        return temp_path

    def cleanup_temp_paths(self) -> None:
        """Remove every pending temp path in the order it was generated.

        Missing paths are skipped. The first failing removal is raised and
        leaves that entry and all later ones pending.
        """
        while self._temp_files:
            temp = self._temp_files[0]
            self._remove(temp)
            self._temp_files.popleft()

    @staticmethod
    def _remove(temp: Path) -> None:
        try:
            if temp.is_symlink() or temp.is_file():
                temp.unlink()
                logger.debug("Removed temp file %s", temp)
            elif temp.is_dir():
                shutil.rmtree(temp)
                logger.debug("Removed temp directory %s", temp)
        except FileNotFoundError:
            # removed out of band between the check and the removal
            if os.path.lexists(temp):
                raise
            logger.debug("Temp path %s vanished before removal", temp)

    def __enter__(self) -> "FileUtility":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup_temp_paths()

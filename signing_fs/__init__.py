"""Filesystem helpers for the document signing and validation tools."""
from signing_fs.core.file_utility import FileUtility
from signing_fs.utils.errors import InvalidInputError
from signing_fs.utils.file_utils import (
    create_directory,
    directory,
    encode_name,
    file_exists,
    file_extension,
    file_name,
    file_size,
    join_path,
    modified_time,
    update_modified_time,
)
from signing_fs.utils.hex_utils import hex_to_bytes
from signing_fs.utils.uri_utils import from_uri_path, to_uri_path

__all__ = [
    'FileUtility',
    'InvalidInputError',
    'create_directory',
    'directory',
    'encode_name',
    'file_exists',
    'file_extension',
    'file_name',
    'file_size',
    'from_uri_path',
    'hex_to_bytes',
    'join_path',
    'modified_time',
    'to_uri_path',
    'update_modified_time',
]

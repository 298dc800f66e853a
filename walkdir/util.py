import datetime
import re
import os
import stat

import fs
import fs.filesize
import tzlocal

try:
    DEFAULT_TZ = tzlocal.get_localzone()
except Exception:  # pylint: disable=broad-except
    print('Could not determine timezone, defaulting to UTC')
    DEFAULT_TZ = datetime.timezone.utc


class UnsupportedFilesystemError(Exception):
    """Error for unsupported filesystem type"""
    pass


def normalize_path(pathname, sep='/'):
    """Collapse repeated separators and strip a trailing separator.

    Arguments:
        pathname (str): The path to normalize
        sep (str): The path separator

    Returns:
        str: The normalized path
    """
    pathname = re.sub('{}+'.format(re.escape(sep)), lambda match: sep, pathname)
    if len(pathname) > 1 and pathname.endswith(sep):
        pathname = pathname[:-1]
    return pathname


def check_walk_args(pathname, follow_symlinks=None, visitor=None):
    """Validate the arguments of a traversal before any I/O happens.

    Raises TypeError or ValueError for invalid arguments.
    """
    if not isinstance(pathname, str):
        raise TypeError('pathname must be a non-empty string, got {}'.format(_type_name(pathname)))
    if not pathname.strip():
        raise ValueError('pathname must be a non-empty string, got {}'.format(_type_name(pathname)))
    if follow_symlinks is not None and not isinstance(follow_symlinks, bool):
        raise TypeError('follow_symlinks must be a boolean, got {}'.format(_type_name(follow_symlinks)))
    if visitor is not None and not callable(visitor):
        raise TypeError('visitor must be a callable, got {}'.format(_type_name(visitor)))


def _type_name(value):
    return type(value).__name__


def is_fs_url(path):
    """Check if path looks like a PyFilesystem url (such as mem:// or osfs://~/data)"""
    return bool(re.match(r'^[a-z][a-z0-9+.-]*://', path, re.I))


def to_fs_url(path, support_archive=True):
    """Convert path to an fs url (such as osfs://~/data)

    Arguments:
        path (str): The path to convert
        support_archive (bool): Whether or not to support archives

    Returns:
        str: A filesystem url
    """
    if is_fs_url(path):
        return path

    if not os.path.isdir(path):
        if support_archive:
            # Specialized path options for tar/zip files
            if is_tar_file(path):
                return 'tar://{}'.format(path)

            if is_zip_file(path):
                return 'zip://{}'.format(path)

        raise UnsupportedFilesystemError('Unknown or unsupported filesystem for: {}'.format(path))

    # Default is OSFS pointing at directory
    return 'osfs://{}'.format(path)


def is_tar_file(path):
    """Check if path appears to be a tar archive"""
    return bool(re.match(r'^.*(\.tar|\.tgz|\.tar\.gz|\.tar\.bz2)$', path, re.I))


def is_zip_file(path):
    """Check if path appears to be a zip archive"""
    _, ext = fs.path.splitext(path.lower())
    return (ext == '.zip')


def is_archive(path):
    """Check if path appears to be a zip or tar archive"""
    return is_zip_file(path) or is_tar_file(path)


def format_size(size):
    """Format a byte count for display, or '-' if unknown"""
    if size is None:
        return '-'
    return fs.filesize.traditional(size)


def format_mode(mode):
    """Format permission bits like ls -l does, or '-' if unknown"""
    if mode is None:
        return '-'
    return stat.filemode(mode)


def format_timestamp(timestamp, timezone=None):
    """Format a POSIX timestamp in the local timezone

    Arguments:
        timestamp (float): Seconds since the epoch, or None
        timezone (tzinfo): The timezone to use, defaults to the local zone

    Returns:
        str: The formatted time
    """
    if timestamp is None:
        return '-'
    timezone = DEFAULT_TZ if timezone is None else timezone
    value = datetime.datetime.fromtimestamp(timestamp, tz=timezone)
    return value.strftime('%Y-%m-%d %H:%M')

"""Filesystem implemented directly on top of the os module"""
import errno
import os
import stat

from .abstract_fs import AbstractFilesystem, DirHandle, FileStat

OPEN_FLAGS = os.O_RDONLY | getattr(os, 'O_DIRECTORY', 0)
O_NOFOLLOW = getattr(os, 'O_NOFOLLOW', 0)

# scandir accepts a directory descriptor on most POSIX platforms
SCANDIR_FD = os.scandir in os.supports_fd


class OsDirHandle(DirHandle):
    """Directory handle wrapping an os.scandir iterator"""
    def __init__(self, iterator, fd=None):
        self._iterator = iterator
        self._fd = fd

    def readdir(self):
        if self._iterator is None:
            return None
        entry = next(self._iterator, None)
        if entry is None:
            return None
        return entry.name

    def close(self):
        if self._iterator is not None:
            self._iterator.close()
            self._iterator = None
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None


class OsFilesystem(AbstractFilesystem):
    """The local filesystem"""

    def opendir(self, path, follow_symlinks=False):
        if not SCANDIR_FD:
            if not follow_symlinks and os.path.islink(path):
                raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)
            return OsDirHandle(os.scandir(path))

        flags = OPEN_FLAGS
        if not follow_symlinks:
            flags |= O_NOFOLLOW

        try:
            fd = os.open(path, flags)
        except NotADirectoryError:
            # Linux reports O_NOFOLLOW on a symlink as ENOTDIR when O_DIRECTORY is set
            if not follow_symlinks and os.path.islink(path):
                raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)
            raise

        try:
            iterator = os.scandir(fd)
        except OSError:
            os.close(fd)
            raise
        return OsDirHandle(iterator, fd)

    def stat(self, path, follow_symlinks=False):
        if follow_symlinks:
            result = os.stat(path)
            return FileStat.from_stat_result(result, is_link=os.path.islink(path))

        result = os.lstat(path)
        return FileStat.from_stat_result(result, is_link=stat.S_ISLNK(result.st_mode))

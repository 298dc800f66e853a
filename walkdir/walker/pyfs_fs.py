"""Filesystem implemented in terms of PyFs"""
import contextlib
import errno
import os

import fs
import fs.errors

from .abstract_fs import AbstractFilesystem, DirHandle, FileStat, FILE, DIRECTORY, SYMLINK

NAMESPACES = ['details', 'link', 'stat']


@contextlib.contextmanager
def convert_fs_errors(path):
    """Translate PyFs errors into the matching builtin OSError subclasses"""
    try:
        yield
    except fs.errors.ResourceNotFound as ex:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from ex
    except fs.errors.DirectoryExpected as ex:
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path) from ex
    except fs.errors.PermissionDenied as ex:
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path) from ex
    except fs.errors.FSError as ex:
        raise OSError(errno.EIO, str(ex), path) from ex


def _is_link(info):
    return info.has_namespace('link') and info.target is not None


class PyFsDirHandle(DirHandle):
    """Directory handle wrapping a PyFs scandir iterator"""
    def __init__(self, iterator, path):
        self._iterator = iterator
        self.path = path

    def readdir(self):
        if self._iterator is None:
            return None
        with convert_fs_errors(self.path):
            info = next(self._iterator, None)
        if info is None:
            return None
        return info.name

    def close(self):
        if self._iterator is not None:
            close = getattr(self._iterator, 'close', None)
            if close is not None:
                close()
            self._iterator = None


class PyFsFilesystem(AbstractFilesystem):
    """Filesystem that is implemented in terms of PyFs"""
    def __init__(self, fs_url, src_fs=None):
        """Initialize the filesystem

        Args:
            fs_url (str): The PyFs url to open (e.g. mem://, osfs://~/data, zip://data.zip)
            src_fs (fs): The fs instance or None
        """
        self.fs_url = fs_url
        self._owns_fs = src_fs is None
        self.src_fs = src_fs or fs.open_fs(fs_url)

    def opendir(self, path, follow_symlinks=False):
        with convert_fs_errors(path):
            info = self.src_fs.getinfo(path, namespaces=['link'])
            if not info.is_dir:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
            if not follow_symlinks and _is_link(info):
                raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)
            iterator = iter(self.src_fs.scandir(path))
        return PyFsDirHandle(iterator, path)

    def stat(self, path, follow_symlinks=False):
        with convert_fs_errors(path):
            info = self.src_fs.getinfo(path, namespaces=NAMESPACES)

        is_link = _is_link(info)
        if is_link and not follow_symlinks:
            type = SYMLINK
        elif info.is_dir:
            type = DIRECTORY
        else:
            type = FILE

        return FileStat(type,
                size=info.get('details', 'size'),
                mode=info.get('stat', 'st_mode'),
                modified=info.get('details', 'modified'),
                is_link=is_link)

    def close(self):
        if self._owns_fs:
            self.src_fs.close()

"""Contracts for the filesystems a traversal reads from"""
from abc import ABC, abstractmethod
import stat as stat_module

FILE = 'file'
DIRECTORY = 'directory'
SYMLINK = 'symlink'
OTHER = 'other'


class FileStat(object):
    """Metadata for a single path, as reported by a filesystem"""
    def __init__(self, type, size=None, mode=None, modified=None, is_link=False):
        """Initialize the file metadata

        Args:
            type (str): One of 'file', 'directory', 'symlink' or 'other'
            size (int): The size in bytes, if known
            mode (int): The st_mode bits, if known
            modified (float): The modification time as a POSIX timestamp, if known
            is_link (bool): Whether or not the path itself is a symbolic link
        """
        self.type = type
        self.size = size
        self.mode = mode
        self.modified = modified
        self.is_link = is_link

    @property
    def is_dir(self):
        return self.type == DIRECTORY

    @classmethod
    def from_stat_result(cls, result, is_link=False):
        """Create a FileStat from an os.stat_result"""
        mode = result.st_mode
        if stat_module.S_ISDIR(mode):
            type = DIRECTORY
        elif stat_module.S_ISREG(mode):
            type = FILE
        elif stat_module.S_ISLNK(mode):
            type = SYMLINK
        else:
            type = OTHER
        return cls(type, size=result.st_size, mode=mode,
                modified=result.st_mtime, is_link=is_link or type == SYMLINK)

    def __eq__(self, other):
        if not isinstance(other, FileStat):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return 'FileStat(type={!r}, size={!r}, mode={!r}, modified={!r}, is_link={!r})'.format(
            self.type, self.size, self.mode, self.modified, self.is_link)


class StatError(object):
    """Stands in for FileStat when a path could not be classified"""
    type = None
    is_dir = False

    def __init__(self, error):
        self.error = error

    def __repr__(self):
        return 'StatError({!r})'.format(self.error)


class DirHandle(ABC):
    """An open directory that returns its entry names one at a time"""

    @abstractmethod
    def readdir(self):
        """Read the next entry name

        Returns:
            str: The next name, or None when there are no more names
        """

    @abstractmethod
    def close(self):
        """Release the handle. Calling close more than once is allowed."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class AbstractFilesystem(ABC):
    """Provides directory handles and path classification for a traversal"""
    sep = '/'

    @abstractmethod
    def opendir(self, path, follow_symlinks=False):
        """Open a directory for reading

        Args:
            path (str): The directory path
            follow_symlinks (bool): Whether path may be a symbolic link to a directory

        Returns:
            DirHandle: The open directory

        Raises:
            FileNotFoundError: If path does not exist
            NotADirectoryError: If path is not a directory
            OSError: For any other failure, including ELOOP for a symlink that is not followed
        """

    @abstractmethod
    def stat(self, path, follow_symlinks=False):
        """Get metadata for path

        Args:
            path (str): The path to inspect
            follow_symlinks (bool): Whether to report on a symlink's target instead of the link

        Returns:
            FileStat: The metadata

        Raises:
            OSError: If the path cannot be inspected
        """

    def classify(self, path, follow_symlinks=False):
        """Determine whether path is a directory

        Classification failures are returned rather than raised.

        Returns:
            tuple: (is_dir, FileStat or StatError)
        """
        try:
            info = self.stat(path, follow_symlinks=follow_symlinks)
        except OSError as ex:
            return False, StatError(ex)
        return info.is_dir, info

    def join(self, parent, name):
        """Build a child path, without doubling the separator of a root parent"""
        if parent.endswith(self.sep):
            return parent + name
        return '{}{}{}'.format(parent, self.sep, name)

    def close(self):
        """Release any resources held by the filesystem"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

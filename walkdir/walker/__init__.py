"""Provides filesystem walkers"""
from .abstract_fs import AbstractFilesystem, DirHandle, FileStat, StatError
from .os_fs import OsFilesystem
from .pyfs_fs import PyFsFilesystem
from .factory import open_filesystem
from .state import WalkState
from .reader import read_next_entry, Entry, Failure, EXHAUSTED
from .iterator import WalkIterator
from .visitor import walk_with_visitor, VisitResult, SKIP, CONTINUE

from .. import util


def walkdir(pathname, follow_symlinks=False, visitor=None, filesystem=None):
    """Walk a directory tree, depth first.

    Without a visitor, returns a WalkIterator to pull entries from. With a
    visitor, walks the whole tree calling visitor(path, name, is_dir, depth, stat)
    for each entry and returns the terminal error, or None on success.

    A root that does not exist is walked as an empty directory. Symbolic
    link cycles are not detected when follow_symlinks is True.

    Arguments:
        pathname (str): The directory to walk
        follow_symlinks (bool): Whether to descend into symbolic links to directories
        visitor (callable): The optional visitor function
        filesystem (AbstractFilesystem): Where to walk, defaults to the local filesystem

    Returns:
        WalkIterator|WalkError|None: The iterator, or the result of visiting
    """
    util.check_walk_args(pathname, follow_symlinks, visitor)

    if filesystem is None:
        filesystem = OsFilesystem()

    root = util.normalize_path(pathname, sep=filesystem.sep)
    state = WalkState(root, filesystem, follow_symlinks=follow_symlinks is True)

    if visitor is not None:
        return walk_with_visitor(state, visitor)
    return WalkIterator(state)


def walk_tree(pathname, visitor, follow_symlinks=False, filesystem=None):
    """Like walkdir with a visitor, but raise the terminal error instead of returning it"""
    if visitor is None:
        raise TypeError('visitor must be a callable, got NoneType')
    error = walkdir(pathname, follow_symlinks=follow_symlinks, visitor=visitor,
            filesystem=filesystem)
    if error is not None:
        raise error

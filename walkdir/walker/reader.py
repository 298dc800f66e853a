"""Advance a traversal by one entry at a time"""
import collections
import logging

from ..errors import OpenDirError, ReadDirError

log = logging.getLogger(__name__)

DOT_ENTRIES = frozenset(['.', '..'])


class Entry(collections.namedtuple('Entry', ['path', 'name', 'is_dir', 'depth', 'stat'])):
    """A visited directory entry

    Attributes:
        path (str): The full path of the entry
        name (str): The base name of the entry
        is_dir (bool): Whether the entry is a directory that will be descended into
        depth (int): Directory levels from the root, entries of the root have depth 1
        stat (FileStat|StatError): The entry metadata, or the reason it is unavailable
    """
    __slots__ = ()

    error = None


class Exhausted(object):
    """Read result when no entries remain"""
    path = None
    error = None

    def __bool__(self):
        return False

    def __repr__(self):
        return 'EXHAUSTED'


EXHAUSTED = Exhausted()


class Failure(collections.namedtuple('Failure', ['error', 'replay'])):
    """Read result for a terminal error.

    The first failure of a traversal has an empty path, every replay of the
    same error has no path at all.
    """
    __slots__ = ()

    @property
    def path(self):
        return None if self.replay else ''


def _open_next_dir(state):
    """Make sure a directory handle is open.

    Returns:
        DirHandle: The open handle, or None when nothing is left to open or an error was latched
    """
    while state.handle is None:
        item = state.pop()
        if item is None:
            state.pathname = state.depth = None
            return None

        state.pathname, state.depth = item
        try:
            state.handle = state.filesystem.opendir(state.pathname,
                    follow_symlinks=state.follow_symlinks)
        except FileNotFoundError:
            log.debug('Skipping missing directory: %s', state.pathname)
        except OSError as ex:
            state.error = OpenDirError(state.pathname, ex)
            state.error.__cause__ = ex
            log.debug('Walk stopped: %s', state.error)
            return None
        else:
            log.debug('Opened directory: %s (depth=%d)', state.pathname, state.depth)

    return state.handle


def read_next_entry(state):
    """Read the next entry of a traversal

    Arguments:
        state (WalkState): The traversal state

    Returns:
        Entry: The next entry, EXHAUSTED when the traversal is complete, or a Failure
    """
    if state.error is not None:
        return Failure(state.error, True)

    filesystem = state.filesystem
    while True:
        handle = _open_next_dir(state)
        if state.error is not None:
            return Failure(state.error, False)
        if handle is None:
            return EXHAUSTED

        try:
            name = handle.readdir()
            while name in DOT_ENTRIES:
                name = handle.readdir()
        except OSError as ex:
            state.error = ReadDirError(state.pathname, ex)
            state.error.__cause__ = ex
            log.debug('Walk stopped: %s', state.error)
            state.close_handle()
            return Failure(state.error, False)

        if name is not None:
            path = filesystem.join(state.pathname, name)
            is_dir, info = filesystem.classify(path, follow_symlinks=state.follow_symlinks)
            if is_dir:
                state.push(path, state.depth + 1)
            return Entry(path, name, is_dir, state.depth, info)

        state.close_handle()

"""Push-style consumption of a traversal"""
import collections
import logging

from ..errors import VisitorError
from .reader import read_next_entry, Failure

log = logging.getLogger(__name__)


class VisitResult(collections.namedtuple('VisitResult', ['skip', 'error'])):
    """What a visitor wants to happen after visiting an entry

    Attributes:
        skip (bool): Do not descend into the visited directory
        error (Exception): Stop the traversal with this error
    """
    __slots__ = ()

    def __new__(cls, skip=False, error=None):
        return super(VisitResult, cls).__new__(cls, skip, error)


SKIP = VisitResult(skip=True)
CONTINUE = VisitResult()


def _to_visit_result(value):
    if isinstance(value, VisitResult):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return VisitResult(*value)
    # Any other return value only skips when it is exactly True
    if value is True:
        return SKIP
    return CONTINUE


def walk_with_visitor(state, visitor):
    """Drive a traversal to the end, calling visitor for every entry

    The visitor is called as visitor(path, name, is_dir, depth, stat) and may
    return True (or VisitResult(skip=True)) to avoid descending into a
    directory, or an error (VisitResult(error=...), or by raising) to stop.

    Arguments:
        state (WalkState): The traversal state
        visitor (callable): The visitor function

    Returns:
        WalkError: The terminal error, or None if the traversal completed
    """
    with state:
        while True:
            result = read_next_entry(state)
            if isinstance(result, Failure):
                return result.error
            if not result:
                return None

            path, name, is_dir, depth, info = result
            try:
                visit = _to_visit_result(visitor(path, name, is_dir, depth, info))
            except Exception as ex:  # pylint: disable=broad-except
                visit = VisitResult(error=ex)

            if visit.error is not None:
                error = VisitorError(path, visit.error)
                error.__cause__ = visit.error
                log.debug('Walk stopped: %s', error)
                return error

            if is_dir and visit.skip:
                # The directory was the last one pushed, so it is still on top
                log.debug('Skipping subtree: %s', path)
                state.pop()

"""Pull-style consumption of a traversal"""
from .reader import read_next_entry, Failure


class WalkIterator(object):
    """Iterate over the entries of a traversal.

    Iterating yields Entry tuples until the traversal is complete. A terminal
    error is raised from next(), and every later call to next() raises the
    very same error instance again. Use read() to get the tagged read results
    instead of exceptions.

    The open directory handle is released on exhaustion, on error, on close()
    and when used as a context manager.
    """
    def __init__(self, state):
        self.state = state

    def read(self):
        """Read the next result

        Returns:
            Entry|Exhausted|Failure: The tagged read result
        """
        result = read_next_entry(self.state)
        if not result or isinstance(result, Failure):
            self.state.close()
        return result

    def __iter__(self):
        return self

    def __next__(self):
        result = self.read()
        if isinstance(result, Failure):
            raise result.error
        if not result:
            raise StopIteration
        return result

    @property
    def error(self):
        """The latched error, if the traversal failed"""
        return self.state.error

    def close(self):
        self.state.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        # Release a handle abandoned mid-traversal
        state = getattr(self, 'state', None)
        if state is not None:
            state.close()

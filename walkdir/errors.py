"""Errors raised or returned while walking directories"""


class CliError(Exception):
    """Error that is reported to the user by the command line interface"""
    pass


class WalkError(Exception):
    """Base class for terminal traversal errors.

    Once a traversal produces one of these, the traversal state keeps it and
    returns the same instance on every later read.

    Attributes:
        path (str): The path that was being processed
        cause (Exception): The underlying error, if any
    """
    action = 'failed to walk'

    def __init__(self, path, cause=None):
        self.path = path
        self.cause = cause
        super(WalkError, self).__init__(self.format_message())

    def format_message(self):
        msg = '{}{}'.format(self.action, self.format_path())
        if self.cause is not None:
            msg = '{}: {}'.format(msg, self.cause)
        return msg

    def format_path(self):
        return ' {}'.format(self.path)


class OpenDirError(WalkError):
    """A pending directory could not be opened for a reason other than not existing"""
    action = 'failed to opendir'

    def format_path(self):
        return '({!r})'.format(self.path)


class ReadDirError(WalkError):
    """Reading the names of an open directory failed"""
    action = 'failed to readdir'

    def format_path(self):
        return '({})'.format(self.path)


class VisitorError(WalkError):
    """The visitor function reported an error for an entry"""
    action = 'visitor failed for'

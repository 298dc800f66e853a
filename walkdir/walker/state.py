"""Mutable state threaded through successive reads of one traversal"""


class WalkState(object):
    """State for a single traversal. Never share an instance between traversals or threads.

    Attributes:
        dirs (list): Pending directory paths, used as a stack
        depths (list): Depth of each pending directory, same length as dirs
        follow_symlinks (bool): Whether symbolic links to directories are followed
        filesystem (AbstractFilesystem): Where directories are opened and classified
        pathname (str): Path of the directory that is currently open
        depth (int): Depth of the directory that is currently open
        handle (DirHandle): The currently open directory handle
        error (WalkError): The latched terminal error
    """
    def __init__(self, root, filesystem, follow_symlinks=False):
        self.dirs = [root]
        self.depths = [1]
        self.follow_symlinks = follow_symlinks
        self.filesystem = filesystem

        self.pathname = None
        self.depth = None
        self.handle = None
        self.error = None

    def push(self, path, depth):
        self.dirs.append(path)
        self.depths.append(depth)

    def pop(self):
        """Remove and return the most recently pushed (path, depth), or None if empty"""
        if not self.dirs:
            return None
        return self.dirs.pop(), self.depths.pop()

    def close_handle(self):
        handle, self.handle = self.handle, None
        if handle is not None:
            handle.close()

    def close(self):
        """Release the open directory handle, if any"""
        self.close_handle()

    @property
    def closed(self):
        return self.handle is None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return 'WalkState(pathname={!r}, dirs={!r}, depths={!r}, error={!r})'.format(
            self.pathname, self.dirs, self.depths, self.error)

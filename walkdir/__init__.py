"""Recursive directory traversal with pull and push consumption"""
from .errors import WalkError, OpenDirError, ReadDirError, VisitorError
from .walker import (walkdir, walk_tree, WalkIterator, WalkState, Entry, Failure, EXHAUSTED,
        VisitResult, SKIP, CONTINUE, FileStat, StatError, AbstractFilesystem, DirHandle,
        OsFilesystem, PyFsFilesystem, open_filesystem, read_next_entry)

import errno
import os
import shutil
import tempfile

import fs
import pytest

from walkdir.walker import AbstractFilesystem, DirHandle, FileStat

# Directory chain and the number of files created in each level
CHAIN = ['testdir', 'foo', 'bar', 'baz', 'qux']
FILES_PER_LEVEL = [2, 3, 1, 4, 2]


@pytest.fixture(scope="function")
def mock_fs():
    temp_path = tempfile.mkdtemp()
    temp_url = 'osfs://{}'.format(temp_path)
    opened = []

    def create_fn(structure):
        mockfs = fs.open_fs(temp_url)
        opened.append(mockfs)
        for path, files in structure.items():
            with mockfs.makedirs(path, recreate=True) as subdir:
                for name in files:
                    with subdir.open(name, 'w') as f:
                        f.write('Hello World!')

        return mockfs, temp_path

    yield create_fn

    for mockfs in opened:
        mockfs.close()

    shutil.rmtree(temp_path)


@pytest.fixture(scope="function")
def chain_tree(mock_fs, monkeypatch):
    """Create ./testdir/foo/bar/baz/qux with files at every level.

    The working directory is changed to the temp dir, so paths are relative.

    Returns:
        dict: Expected map of path to is_dir for everything below ./testdir
    """
    structure = {}
    expected = {}
    parts = ['.']
    count = 1
    for name, nfiles in zip(CHAIN, FILES_PER_LEVEL):
        parts.append(name)
        dirpath = '/'.join(parts)
        files = ['{}.txt'.format(i) for i in range(count, count + nfiles)]
        count += nfiles

        structure['/'.join(parts[1:])] = files
        expected[dirpath] = True
        for filename in files:
            expected['{}/{}'.format(dirpath, filename)] = False

    _, temp_path = mock_fs(structure)
    monkeypatch.chdir(temp_path)

    # The root itself is not an entry
    del expected['./testdir']
    return expected


class FakeHandle(DirHandle):
    def __init__(self, owner, path, names):
        self.owner = owner
        self.path = path
        self.names = list(names)
        self.closed = False

    def readdir(self):
        if self.path in self.owner.read_errors:
            raise self.owner.read_errors[self.path]
        if not self.names:
            return None
        return self.names.pop(0)

    def close(self):
        if not self.closed:
            self.closed = True
            self.owner.open_handles.remove(self)


class FakeFilesystem(AbstractFilesystem):
    """In-memory filesystem that can be told to fail.

    Arguments:
        tree (dict): Map of directory path to the names it contains, files are any
            name that is not itself a key
        open_errors (dict): Map of path to the error opendir raises
        read_errors (dict): Map of path to the error readdir raises
        stat_errors (dict): Map of path to the error stat raises
    """
    def __init__(self, tree, open_errors=None, read_errors=None, stat_errors=None):
        self.tree = tree
        self.open_errors = open_errors or {}
        self.read_errors = read_errors or {}
        self.stat_errors = stat_errors or {}
        self.open_handles = []
        self.max_open = 0
        self.opened = []

    def opendir(self, path, follow_symlinks=False):
        if path in self.open_errors:
            raise self.open_errors[path]
        if path not in self.tree:
            if path in self._all_files():
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

        handle = FakeHandle(self, path, self.tree[path])
        self.open_handles.append(handle)
        self.opened.append(path)
        self.max_open = max(self.max_open, len(self.open_handles))
        return handle

    def stat(self, path, follow_symlinks=False):
        if path in self.stat_errors:
            raise self.stat_errors[path]
        if path in self.tree:
            return FileStat('directory')
        return FileStat('file', size=12)

    def _all_files(self):
        result = set()
        for parent, names in self.tree.items():
            for name in names:
                result.add(self.join(parent, name))
        return result


@pytest.fixture
def fake_fs():
    return FakeFilesystem

import datetime
import stat

import pytest

from walkdir import util


def test_normalize_path():
    # Repeated separators collapse
    assert util.normalize_path('a//b//c') == 'a/b/c'
    assert util.normalize_path('./testdir//foo///bar') == './testdir/foo/bar'

    # Trailing separator is removed
    assert util.normalize_path('a/b/') == 'a/b'
    assert util.normalize_path('a/b//') == 'a/b'

    # Root stays root
    assert util.normalize_path('/') == '/'
    assert util.normalize_path('///') == '/'

    # Nothing to do
    assert util.normalize_path('.') == '.'
    assert util.normalize_path('a') == 'a'


def test_normalize_path_other_separator():
    assert util.normalize_path('C:\\\\data\\\\x\\', sep='\\') == 'C:\\data\\x'


def test_check_walk_args_pathname():
    with pytest.raises(TypeError, match='pathname must be a non-empty string, got NoneType'):
        util.check_walk_args(None)

    with pytest.raises(TypeError, match='pathname must be a non-empty string, got int'):
        util.check_walk_args(123)

    with pytest.raises(ValueError, match='pathname must be a non-empty string, got str'):
        util.check_walk_args('')

    with pytest.raises(ValueError, match='pathname must be a non-empty string, got str'):
        util.check_walk_args('  \t')


def test_check_walk_args_options():
    with pytest.raises(TypeError, match='follow_symlinks must be a boolean, got int'):
        util.check_walk_args('./testdir', 123)

    with pytest.raises(TypeError, match='visitor must be a callable, got str'):
        util.check_walk_args('./testdir', False, 'visit')

    # Valid
    util.check_walk_args('./testdir')
    util.check_walk_args('./testdir', True, lambda *args: None)


def test_is_fs_url():
    assert util.is_fs_url('mem://')
    assert util.is_fs_url('osfs:///tmp/data')
    assert util.is_fs_url('zip://data.zip')
    assert not util.is_fs_url('/tmp/data')
    assert not util.is_fs_url('C:\\data')
    assert not util.is_fs_url('data.zip')


def test_to_fs_url(tmpdir):
    assert util.to_fs_url('mem://') == 'mem://'
    assert util.to_fs_url(str(tmpdir)) == 'osfs://{}'.format(tmpdir)
    assert util.to_fs_url('data.zip') == 'zip://data.zip'
    assert util.to_fs_url('data.tar.gz') == 'tar://data.tar.gz'

    with pytest.raises(util.UnsupportedFilesystemError):
        util.to_fs_url('data.zip', support_archive=False)

    with pytest.raises(util.UnsupportedFilesystemError):
        util.to_fs_url(str(tmpdir.join('missing.txt')))


def test_archive_detection():
    assert util.is_archive('a/b/data.ZIP')
    assert util.is_archive('data.tgz')
    assert util.is_archive('data.tar.bz2')
    assert not util.is_archive('data.txt')


def test_format_helpers():
    assert util.format_size(None) == '-'
    assert util.format_size(1) == '1 byte'
    assert util.format_size(2048) == '2.0 KB'

    assert util.format_mode(None) == '-'
    assert util.format_mode(stat.S_IFDIR | 0o755) == 'drwxr-xr-x'

    assert util.format_timestamp(None) == '-'
    assert util.format_timestamp(0, timezone=datetime.timezone.utc) == '1970-01-01 00:00'

from .. import util
from .os_fs import OsFilesystem
from .pyfs_fs import PyFsFilesystem


def open_filesystem(path):
    """Pick the filesystem that can walk path

    Plain directory paths are walked with the os module, fs urls and
    zip or tar archives are opened with PyFs and walked from their root.

    Arguments:
        path (str): A directory path, archive path or fs url

    Returns:
        tuple: (AbstractFilesystem, root path within that filesystem)
    """
    if util.is_fs_url(path) or util.is_archive(path):
        return PyFsFilesystem(util.to_fs_url(path)), '/'
    return OsFilesystem(), path

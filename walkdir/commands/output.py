"""Helpers shared by the walk commands"""
import functools
import logging
import sys

import crayons
import fs.errors

from .. import util
from ..errors import CliError
from ..walker import open_filesystem

log = logging.getLogger(__name__)

SPACER_STR = '|   '
ENTRY_STR = '├── '


def open_walk_filesystem(path):
    """Open the filesystem for path, reporting unusable paths as CliError

    Returns:
        tuple: (AbstractFilesystem, root path within that filesystem)
    """
    try:
        return open_filesystem(path)
    except (util.UnsupportedFilesystemError, fs.errors.CreateFailed, OSError) as ex:
        raise CliError('Cannot walk {}: {}'.format(path, ex)) from ex


def print_error(error, file=None):
    print(crayons.red('Error: {}'.format(error)), file=file or sys.stderr)


def handle_cli_errors(func):
    """Print CliErrors raised by a command and exit with status 1"""
    @functools.wraps(func)
    def wrapper(args):
        try:
            return func(args)
        except CliError as ex:
            print_error(ex)
            return 1
    return wrapper


def format_name(name, is_dir):
    if is_dir:
        return str(crayons.blue(name + '/', bold=True))
    return name


def format_long(path, is_dir, info):
    """Format an entry like ls -l: mode, size, modification time and path"""
    if info.type is None:
        log.warning('Cannot stat %s: %s', path, info.error)
        mode = size = modified = None
    else:
        mode = info.mode
        size = None if is_dir else info.size
        modified = info.modified

    return '{:<10} {:>9} {:<16} {}'.format(util.format_mode(mode), util.format_size(size),
            util.format_timestamp(modified), format_name(path, is_dir))

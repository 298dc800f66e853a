from ..config import Config
from ..walker import walkdir
from .. import util
from .output import open_walk_filesystem, handle_cli_errors, print_error

class UsageSummary(object):
    """Running totals for a walk"""
    def __init__(self):
        self.directories = 0
        self.files = 0
        self.size = 0
        self.unreadable = 0

    def visit(self, path, name, is_dir, depth, info):
        if info.type is None:
            self.unreadable += 1
        elif is_dir:
            self.directories += 1
        else:
            self.files += 1
            self.size += info.size or 0

    def __str__(self):
        msg = '{} directories, {} files, {}'.format(self.directories, self.files,
                util.format_size(self.size))
        if self.unreadable:
            msg = '{} ({} unreadable)'.format(msg, self.unreadable)
        return msg

def add_command(subparsers):
    parser = subparsers.add_parser('du', help='Summarize disk usage below a directory')
    parser.add_argument('path', help='The directory, archive or fs url to summarize')
    Config.add_config_args(parser)

    parser.set_defaults(func=disk_usage)
    parser.set_defaults(parser=parser)

    return parser

@handle_cli_errors
def disk_usage(args):
    config = args.config
    filesystem, root = open_walk_filesystem(args.path)
    summary = UsageSummary()

    def visit(path, name, is_dir, depth, info):
        summary.visit(path, name, is_dir, depth, info)
        return is_dir and config.exceeds_max_depth(depth)

    with filesystem:
        error = walkdir(root, follow_symlinks=config.follow_symlinks, visitor=visit,
                filesystem=filesystem)

    if error is not None:
        print_error(error)
        return 1

    print(summary)
    return 0

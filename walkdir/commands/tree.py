import collections

from .. import util
from ..config import Config
from ..walker import walkdir
from .output import open_walk_filesystem, handle_cli_errors, print_error, format_name, SPACER_STR, ENTRY_STR

def add_command(subparsers):
    parser = subparsers.add_parser('tree', help='Print a directory tree')
    parser.add_argument('path', help='The directory, archive or fs url to print')
    Config.add_config_args(parser)

    parser.set_defaults(func=print_tree)
    parser.set_defaults(parser=parser)

    return parser

@handle_cli_errors
def print_tree(args):
    config = args.config
    filesystem, root = open_walk_filesystem(args.path)

    # Subdirectories are read after all of their siblings, so entries are
    # grouped by parent and printed once the walk is done
    children = collections.defaultdict(list)

    def visit(path, name, is_dir, depth, info):
        parent = util.normalize_path(path[:-len(name)], sep=filesystem.sep)
        children[parent].append((path, name, is_dir))
        return is_dir and config.exceeds_max_depth(depth)

    with filesystem:
        error = walkdir(root, follow_symlinks=config.follow_symlinks, visitor=visit,
                filesystem=filesystem)

    print(format_name(args.path, True))
    print_children(children, util.normalize_path(root, sep=filesystem.sep))

    if error is not None:
        print_error(error)
        return 1
    return 0

def print_children(children, parent, prefix=''):
    for path, name, is_dir in sorted(children.get(parent, []), key=lambda child: child[1]):
        print('{}{}{}'.format(prefix, ENTRY_STR, format_name(name, is_dir)))
        if is_dir:
            print_children(children, path, prefix + SPACER_STR)

from ..config import Config
from ..walker import walkdir
from .output import open_walk_filesystem, handle_cli_errors, print_error, format_name, format_long

def add_command(subparsers):
    parser = subparsers.add_parser('ls', help='List every entry below a directory')
    parser.add_argument('path', help='The directory, archive or fs url to list')
    parser.add_argument('-l', '--long', action='store_true', help='Show mode, size and modification time')
    Config.add_config_args(parser, max_depth=False)

    parser.set_defaults(func=list_entries)
    parser.set_defaults(parser=parser)

    return parser

@handle_cli_errors
def list_entries(args):
    config = args.config
    filesystem, root = open_walk_filesystem(args.path)

    with filesystem, walkdir(root, follow_symlinks=config.follow_symlinks, filesystem=filesystem) as entries:
        result = entries.read()
        while result:
            if result.error is not None:
                print_error(result.error)
                return 1

            if config.long_format:
                print(format_long(result.path, result.is_dir, result.stat))
            else:
                print(format_name(result.path, result.is_dir))

            result = entries.read()

    return 0

import crayons

from ..config import Config

from . import ls
from . import tree
from . import du


def get_config(args):
    if getattr(args, 'no_color', False):
        crayons.disable()
    args.config = Config(args)

def print_help(default_parser, parsers):
    def print_help_fn(args):
        subcommands = ' '.join(args.subcommands)
        if subcommands in parsers:
            parsers[subcommands].print_help()
        else:
            default_parser.print_help()

    return print_help_fn

def add_commands(parser):
    # Setup global configuration args
    parser.set_defaults(config=get_config)
    Config.add_logging_args(parser)
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')

    # map commands for help function
    parsers = {}

    # Create subparsers
    subparsers = parser.add_subparsers(title='Available commands', metavar='')

    parsers['ls'] = ls.add_command(subparsers)
    parsers['tree'] = tree.add_command(subparsers)
    parsers['du'] = du.add_command(subparsers)

    # =====
    # help commands
    # =====
    parser_help = subparsers.add_parser('help', help='Show help for a command')
    parser_help.add_argument('subcommands', nargs='*')
    parser_help.set_defaults(func=print_help(parser, parsers))

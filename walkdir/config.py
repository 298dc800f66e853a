import logging

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class Config(object):
    def __init__(self, args=None):
        self.follow_symlinks = getattr(args, 'symlinks', False)

        # None means unlimited
        self.max_depth = getattr(args, 'max_depth', None)
        if self.max_depth is not None and self.max_depth < 1:
            msg = 'Maximum depth must be at least 1, got {}'.format(self.max_depth)
            if args is not None and getattr(args, 'parser', None):
                args.parser.error(msg)
            else:
                raise ValueError(msg)

        self.long_format = getattr(args, 'long', False)

        self.debug = getattr(args, 'debug', False)
        self.quiet = getattr(args, 'quiet', False)

        configure_logging(debug=self.debug, quiet=self.quiet)

    def exceeds_max_depth(self, depth):
        """Check whether entries at depth should not be descended into"""
        return self.max_depth is not None and depth >= self.max_depth

    @staticmethod
    def add_config_args(parser, max_depth=True):
        parser.add_argument('-L', '--symlinks', action='store_true', help='follow symbolic links that resolve to directories')
        if max_depth:
            parser.add_argument('--max-depth', type=int, metavar='N', help='Do not descend more than N directory levels')

    @staticmethod
    def add_logging_args(parser):
        log_group = parser.add_mutually_exclusive_group()
        log_group.add_argument('--debug', action='store_true', help='Turn on debug logging')
        log_group.add_argument('--quiet', action='store_true', help='Only log errors')


def configure_logging(debug=False, quiet=False):
    """Configure the root logger for command line use"""
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level)

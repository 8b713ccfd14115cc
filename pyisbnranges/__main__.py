"""
Main command line interface of the pyisbnranges package.

Like programs such as git, this cli splits its functionality into sub-commands
(see e.g. https://docs.python.org/3/library/argparse.html#sub-commands).

The basic invocation looks like

    isbnranges [OPTIONS] <command> [args]

"""
import sys
import logging
import contextlib

from clldutils.clilib import get_parser_and_subparsers, register_subcommands, PathType, ParserError
from clldutils.loglib import Logging

from .ranges import RangeTable, default_table
from . import commands


def main(args=None, catch_all=False, parsed_args=None, log=None):
    parser, subparsers = get_parser_and_subparsers('isbnranges')
    parser.add_argument(
        '--ranges',
        help="path to a JSON range table (defaults to the table bundled with the package)",
        type=PathType(type='file'),
        default=None)
    register_subcommands(subparsers, commands)

    args = parsed_args or parser.parse_args(args=args)

    if not hasattr(args, "main"):
        parser.print_help()
        return 1

    args.table = RangeTable.from_path(args.ranges) if args.ranges else default_table()

    with contextlib.ExitStack() as stack:
        if not log:  # pragma: no cover
            log = logging.getLogger('pyisbnranges')
            stack.enter_context(Logging(log, level=getattr(args, 'log_level', logging.INFO)))
        args.log = log
        try:
            return args.main(args) or 0
        except KeyboardInterrupt:  # pragma: no cover
            return 0
        except ParserError as e:
            print(e)
            return 64
        except Exception as e:  # pragma: no cover
            if catch_all:
                print(e)
                return 1
            raise


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main() or 0)

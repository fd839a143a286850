import argparse
import logging
import sys
from typing import List, Optional

import yaml

from fslister.lister import EXIT_FAILURE, Lister
from fslister.utils.options import ListOptions

USAGE = '%(prog)s [-l] [-R] [-a] [-i] [-h] [directory]'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def build_parser() -> argparse.ArgumentParser:
    # -h selects human-readable sizes, so argparse help is disabled
    parser = argparse.ArgumentParser(prog='fslister', usage=USAGE, add_help=False)
    parser.add_argument('-l', action='store_true', dest='show_details', help='show details')
    parser.add_argument('-R', action='store_true', dest='recursive', help='list subdirectories recursively')
    parser.add_argument('-a', action='store_true', dest='show_hidden', help='show entries starting with a dot')
    parser.add_argument('-i', action='store_true', dest='show_inode', help='show inode numbers')
    parser.add_argument('-h', action='store_true', dest='human_readable', help='human-readable sizes')
    parser.add_argument('--config', type=str, default=None, help='path to YAML file with default options')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default='WARNING', help='log level')
    parser.add_argument('directory', nargs='?', default='.', help='directory to list')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')

    options = ListOptions()
    if args.config is not None:
        try:
            options = ListOptions.from_yaml(args.config)
        except (OSError, ValueError, yaml.YAMLError) as err:
            print(f"Invalid configuration '{args.config}': {err}", file=sys.stderr)
            return EXIT_FAILURE
    options = options.merge(
        show_details=args.show_details,
        recursive=args.recursive,
        show_hidden=args.show_hidden,
        show_inode=args.show_inode,
        human_readable=args.human_readable
    )
    return Lister().run(args.directory, options)

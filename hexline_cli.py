#!/usr/bin/env python3
"""
hexline CLI
Hex/ASCII dump of a file or standard input.
"""

import sys
import argparse

import argcomplete
from argcomplete.completers import FilesCompleter

from hexline.config import DumpConfig, DEFAULT_CONFIG_PATH, create_default_config
from hexline.dumper import dump_file
from hexline.exceptions import HexlineError
from hexline.logging_config import LOG_LEVELS, setup_logging, get_logger

logger = get_logger('cli')


def module_completer(prefix, parsed_args, **kwargs):
    """Custom completer for comma-separated module names."""
    modules = ['cli', 'dumper', 'hex_reader', 'sink']

    if ',' in prefix:
        parts = prefix.split(',')
        already_specified = [p.strip() for p in parts[:-1]]
        current = parts[-1]
        available = [m for m in modules if m not in already_specified]
        prefix_without_current = ','.join(parts[:-1]) + ','
        return [prefix_without_current + m for m in available if m.startswith(current)]
    else:
        return [m for m in modules if m.startswith(prefix)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Hex/ASCII dump of a file or standard input')
    input_arg = parser.add_argument('input', nargs='?', default='-',
                                    help="File to dump ('-' or omitted = standard input)")
    input_arg.completer = FilesCompleter()
    output_arg = parser.add_argument('-o', '--output', type=str,
                                     help='Write the dump to this file instead of standard output')
    output_arg.completer = FilesCompleter()
    parser.add_argument('-w', '--width', type=int,
                        help='Bytes per line (default from config, 16)')
    parser.add_argument('-g', '--gutter', type=int,
                        help='Bytes per gutter group (default from config, 4)')
    config_arg = parser.add_argument('--config', default=DEFAULT_CONFIG_PATH,
                                     help='Path to configuration file (missing file = defaults)')
    config_arg.completer = FilesCompleter(allowednames=('json',))
    parser.add_argument('--create-config', action='store_true',
                        help='Create default configuration file and exit')
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.upper,
                        help='Set logging level (NONE = disable logging)')
    modules_arg = parser.add_argument('--debug-modules', type=str,
                                      help='Comma-separated list of modules to debug (e.g., hex_reader,sink)')
    modules_arg.completer = module_completer
    parser.add_argument('--colored', action='store_true',
                        help='Use colored log output')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if args.create_config:
        try:
            create_default_config(args.config)
        except HexlineError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    try:
        config = DumpConfig.from_json(args.config)
    except HexlineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.width is not None:
        config.chunk_width = args.width
    if args.gutter is not None:
        config.gutter_interval = args.gutter
    if args.log_level:
        config.log_level = args.log_level

    # Setup logging
    module_levels = {}
    if args.debug_modules:
        for module in args.debug_modules.split(','):
            module_levels[module.strip()] = 'DEBUG'
    setup_logging(config.log_level, module_levels, args.colored)

    output = args.output if args.output else None
    try:
        fmt = config.formatting()
        logger.debug(f"Layout: {fmt}")
        dump_file(args.input, output, fmt)
    except HexlineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())

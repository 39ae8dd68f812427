#! /usr/bin/env python3

# --------------------------------------------------------------------
# Requires Python3 >= 3.10

# --------------------------------------------------------------------
import argparse
import logging
import os
import sys

import rich.console
import rich.logging
import rich.pretty

from nyxlib           import nyxdriver
from nyxlib.nyxerrors import Error, Reporter
from nyxlib.nyxinterp import Returned

log = logging.getLogger('nyxc')

COMMANDS = ('lex', 'parse', 'check', 'run')

# ====================================================================
# Parse command line arguments

def parse_args(argv = None):
    parser = argparse.ArgumentParser(prog = os.path.basename(sys.argv[0]))

    parser.add_argument('-v', '--verbose', action = 'store_true',
                        help = 'log every pipeline stage')
    parser.add_argument('--no-color', action = 'store_true',
                        help = 'disable colored diagnostics')
    parser.add_argument('command', choices = COMMANDS,
                        help = 'stop after this stage (run executes the program)')
    parser.add_argument('input', help = 'input file (.nyx)')

    return parser.parse_args(argv)

def setup_logging(verbose: bool, console: rich.console.Console):
    logging.basicConfig(
        level    = logging.DEBUG if verbose else logging.WARNING,
        format   = '%(name)s: %(message)s',
        handlers = [rich.logging.RichHandler(console = console, show_time = False)],
        force    = True,
    )

# ====================================================================
# Main entry point

def main(argv = None):
    args = parse_args(argv)

    stdout = rich.console.Console(no_color = args.no_color)
    stderr = rich.console.Console(stderr = True, no_color = args.no_color)
    setup_logging(args.verbose, stderr)

    if os.path.splitext(args.input)[1].lower() != '.nyx':
        log.warning('expected a .nyx file, got %s', args.input)

    try:
        with open(args.input, 'r') as stream:
            prgm = stream.read()

    except IOError as e:
        print(f'cannot read input file {args.input}: {e}', file = sys.stderr)
        return 1

    reporter = Reporter(prgm, console = stderr)

    try:
        match args.command:
            case 'lex':
                rich.pretty.pprint(nyxdriver.lex(prgm), console = stdout)

            case 'parse':
                rich.pretty.pprint(nyxdriver.parse(prgm), console = stdout)

            case 'check':
                statements = nyxdriver.check(prgm)
                stdout.print('[green]success[/green]: No errors found!')
                rich.pretty.pprint(statements, console = stdout)

            case 'run':
                execution = nyxdriver.execute(prgm)
                if isinstance(execution.outcome, Returned) and execution.outcome.value is not None:
                    stdout.print(f'Returned: {execution.outcome.value.pprint()}', highlight = False, markup = False)
                stdout.print('Variables:')
                for name, value in execution.variables.asdict().items():
                    stdout.print(f'  - {name}: {value.pprint()}', highlight = False, markup = False)

    except Error as e:
        reporter(e)
        return 1

    return 0

# --------------------------------------------------------------------
if __name__ == '__main__':
    sys.exit(main())

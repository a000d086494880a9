"""
Anpass — fit a polynomial energy surface and locate its stationary point.

    anpass anpass.in                       Two passes, report in anpass.out
    anpass anpass.in result.out            Pass-1 report to result.out
    anpass anpass.in --once                Single pass, no recentering
    anpass anpass.in -q                    No reports, no warnings
    anpass anpass.in --config run.yaml     Numerical settings from YAML
    anpass anpass.in --parquet tables/     Also write parquet tables
"""

import argparse
import logging
import sys
from pathlib import Path


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='anpass',
        description='Fit a polynomial surface to displacement/energy data, '
                    'find its stationary point and emit force constants.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  anpass anpass.in                  Fit, refit about the stationary point, write anpass.out
  anpass anpass.in --once           Only one pass, don't refit to stationary point
  anpass anpass.in --debug          Log every Newton-Raphson update vector
""",
    )
    parser.add_argument('infile', help='Anpass input file')
    parser.add_argument('outfile', nargs='?', default=None,
                        help='Report file for the first pass (default: infile with .out suffix)')
    parser.add_argument('--debug', action='store_true',
                        help='Print debugging information')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help="Print nothing, don't even make report files")
    parser.add_argument('--once', action='store_true',
                        help="Only run one pass, don't refit to stationary point")
    parser.add_argument('--config', default=None,
                        help='YAML file with numerical settings')
    parser.add_argument('--parquet', default=None,
                        help='Directory for residual and force-constant parquet tables')
    parser.add_argument('--log-file', default=None,
                        help='Also write log messages to this file')

    args = parser.parse_args(argv)

    infile = Path(args.infile).expanduser().resolve()
    if not infile.exists():
        print(f"Error: {infile} does not exist")
        sys.exit(1)

    from anpass.config import load_config
    from anpass.logging_config import setup_logging
    from anpass.cli import run_anpass

    config = load_config(args.config).with_overrides(
        debug=True if args.debug else None,
        quiet=True if args.quiet else None,
        once=True if args.once else None,
    )

    if config.debug:
        level = logging.DEBUG
    elif config.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    setup_logging(level=level, log_file=args.log_file)

    run_anpass(infile, outfile=args.outfile, config=config, parquet_dir=args.parquet)


if __name__ == "__main__":
    main()

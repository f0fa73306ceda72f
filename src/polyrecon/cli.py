"""Command-line front end: read a share document, print the constant term."""

import argparse
import logging
import os
import sys
from typing import Optional

from polyrecon import shares
from polyrecon.errors import ReconstructionError
from polyrecon.reconstruct import reconstruct, reconstruct_at

LOG_LEVEL_ENV = 'POLYRECON_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

log = logging.getLogger('polyrecon')


def configure_logging(level: Optional[str] = None) -> None:
    """Send polyrecon log records to stderr at `level`.

    Falls back to $POLYRECON_LOG_LEVEL, then WARNING. An unknown level in
    the environment (or passed in) is reported and replaced by WARNING.
    """
    rejected = None
    level = level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    if level.upper() not in LOG_LEVELS:
        rejected, level = level, DEFAULT_LOG_LEVEL
    level = level.upper()
    log.setLevel(level)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(name)s - %(message)s'))
    log.addHandler(handler)
    if rejected is not None:
        log.warning("Ignoring unknown log level %r (check $%s), expected one of %s",
                    rejected, LOG_LEVEL_ENV, ", ".join(LOG_LEVELS))


def _read_input(source: str) -> shares.ShareSet:
    if source == '-':
        return shares.loads(sys.stdin.read())
    return shares.load(source)


def run(args) -> str:
    share_set = _read_input(args.input)
    if args.at is None:
        return shares.dumps_result(reconstruct(share_set.records, share_set.k))
    value = reconstruct_at(share_set.records, share_set.k, args.at)
    return shares.dumps_value(args.at, value)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='polyrecon',
        description='Recover the constant term of a polynomial from k encoded points')
    ap.add_argument('input', help="JSON share document, or '-' for stdin")
    ap.add_argument('--at', type=int, default=None, metavar='X',
                    help='evaluate the polynomial at X instead of 0')
    ap.add_argument('--log-level', default=None,
                    choices=LOG_LEVELS,
                    type=str.upper,
                    help=f'log verbosity (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})')
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        output = run(args)
    except (ReconstructionError, OSError) as e:
        log.debug("Reconstruction failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

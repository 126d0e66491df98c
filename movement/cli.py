import sys
import json
import re
from typing import Dict, List, Optional, Tuple

from . import SECONDS_PER_DAY
from .watch import Watch, Delta
from .parser import TimeParseError
from .formatters import format_12h, format_24h, format_span
from .logger import setup_logger
from .config import get_config, get_testing_mode

# Get logger
logger = setup_logger(__name__, testing=get_testing_mode())

USAGE = """usage: movement START [DELTA ...] [--12h | --24h] [--strict] [--json] [--verbose]

  START      starting time, e.g. "13:34" or "01:33:23 PM"
  DELTA      +X or -X, where X is seconds ("4343") or a duration ("01:23:45")

examples:
  movement 13:34 +4343 --12h
  movement "01:34 AM" +01:23:45 -1000000"""

FLAGS = {
    '--12h': ('meridiem', True),
    '--24h': ('meridiem', False),
    '--strict': ('strict', True),
    '--json': ('json', True),
    '--verbose': ('verbose', True),
}

seconds_pattern = re.compile(r'\d+', re.ASCII)


def usage_error(message: Optional[str] = None):
    if message:
        print(f"Error: {message}", file=sys.stderr)
    print(USAGE, file=sys.stderr)
    sys.exit(1)


def parse_args(argv: List[str], config: Dict) -> Tuple[str, List[Tuple[int, Delta]], Dict]:
    """Split argv into the start time, signed deltas and options"""
    options = {
        'meridiem': config['meridiem'],
        'strict': config['strict'],
        'json': False,
        'verbose': False,
    }
    positional = []
    for arg in argv:
        if arg in FLAGS:
            key, value = FLAGS[arg]
            options[key] = value
        elif arg.startswith('--'):
            usage_error(f"unknown option {arg}")
        else:
            positional.append(arg)

    if not positional:
        usage_error()

    start, *tokens = positional
    return start, [parse_delta(token) for token in tokens], options


def parse_delta(token: str) -> Tuple[int, Delta]:
    """Turn "+4343" / "-01:23:45" / "90" into (sign, operand)"""
    sign = 1
    if token[:1] in ('+', '-'):
        sign = -1 if token[0] == '-' else 1
        token = token[1:]

    if seconds_pattern.fullmatch(token):
        return sign, int(token)
    return sign, token


def build_watch(start: str, deltas: List[Tuple[int, Delta]], meridiem: bool, strict: bool) -> Watch:
    watch = Watch(start, meridiem, strict=strict)
    for sign, operand in deltas:
        watch.apply_delta(operand, sign=sign)
    return watch


def generate_items(watch: Watch) -> List[dict]:
    """Generate Alfred script filter items"""
    display = watch.to_display_string()
    start_str = format_12h(watch.start % SECONDS_PER_DAY) if watch.meridiem else format_24h(watch.start % SECONDS_PER_DAY)
    return [{
        "title": display,
        "subtitle": f"Started {start_str} • elapsed {format_span(watch.offset)}",
        "arg": display,
        "valid": True,
    }]


def main(argv: Optional[List[str]] = None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        usage_error()

    config = get_config()
    start, deltas, options = parse_args(argv, config)
    logger.debug(f"Start {start!r}, deltas {deltas}, options {options}")

    try:
        watch = build_watch(start, deltas, options['meridiem'], options['strict'])
    except TimeParseError as e:
        logger.error(f"Invalid input: {e}")
        if options['json']:
            print(json.dumps({
                "items": [{
                    "title": "Invalid time",
                    "subtitle": str(e),
                    "valid": False,
                }]
            }))
        else:
            print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if options['json']:
        output = json.dumps({"items": generate_items(watch)})
    elif options['verbose']:
        output = f"{watch} (elapsed {format_span(watch.offset)})"
    else:
        output = str(watch)

    logger.debug(f"Output: {output}")
    print(output)

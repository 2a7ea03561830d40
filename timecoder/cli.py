#!/usr/bin/env python3
"""
Timecode Calculator CLI - convert and do arithmetic on SMPTE timecode.
"""

import argparse
import logging
import sys

from timecoder import arithmetic
from timecoder.errors import TimecodeError, MalformedTimecode
from timecoder.formatting import format_timecode, format_frames, is_timecode_string, parse_input, parse_duration
from timecoder.frame_rate import FrameRate, all_standard_rates, parse_frame_rate
from timecoder.sequence import generate_countup, generate_countdown
from timecoder.timecode import Timecode

# Module-level logger
_logger = logging.getLogger(__name__)


def _frame_rate_arg(text: str) -> FrameRate:
    try:
        return parse_frame_rate(text)
    except TimecodeError as e:
        raise argparse.ArgumentTypeError(str(e))


def _parse_operand(text: str, rate: FrameRate) -> Timecode:
    """Timecode, frame count or digit entry first, then a duration like '5m'."""
    try:
        return parse_input(text, rate)
    except MalformedTimecode:
        # A full HH:MM:SS:FF with a bad field is an error, not a duration
        if is_timecode_string(text):
            raise
        _logger.debug(f"'{text}' is not a timecode, trying duration")
        return Timecode(parse_duration(text, rate), rate)


def _print_value(tc: Timecode, overflow: bool):
    print(f"{format_timecode(tc, overflow)}  ({format_frames(tc)}, {tc.to_seconds():.3f}s)")


def _cmd_convert(args):
    tc = _parse_operand(args.value, args.frame_rate)
    _logger.debug(f"Parsed {args.value!r} as {tc.total_frames} frames at {tc.rate}")
    print(f"Timecode: {format_timecode(tc, args.overflow)}")
    print(f"Frames:   {tc.total_frames}")
    print(f"Seconds:  {tc.to_seconds():.3f}")


def _cmd_add(args):
    a = _parse_operand(args.a, args.frame_rate)
    b = _parse_operand(args.b, args.frame_rate)
    _print_value(arithmetic.add_timecodes(a, b), args.overflow)


def _cmd_sub(args):
    a = _parse_operand(args.a, args.frame_rate)
    b = _parse_operand(args.b, args.frame_rate)
    _print_value(arithmetic.subtract_timecodes(a, b), args.overflow)


def _cmd_diff(args):
    a = _parse_operand(args.a, args.frame_rate)
    b = _parse_operand(args.b, args.frame_rate)
    delta = arithmetic.difference(a, b)
    sign = "-" if delta < 0 else "+"
    magnitude = Timecode(abs(delta), args.frame_rate)
    print(f"{sign}{format_timecode(magnitude, allow_overflow=True)}  ({delta}f)")


def _cmd_mul(args):
    tc = _parse_operand(args.a, args.frame_rate)
    _print_value(arithmetic.multiply(tc, args.n), args.overflow)


def _cmd_div(args):
    tc = _parse_operand(args.a, args.frame_rate)
    _print_value(arithmetic.divide(tc, args.n), args.overflow)


def _cmd_seq(args):
    start = _parse_operand(args.start, args.frame_rate)
    duration = parse_duration(args.duration, args.frame_rate)

    if args.countdown:
        timecodes = generate_countdown(start, duration)
    else:
        timecodes = generate_countup(start, duration)

    _logger.debug(f"Generated {len(timecodes)} timecodes from {start}")
    for tc in timecodes[::args.step]:
        direction = "▼" if args.countdown else "▲"
        print(f"{direction} {format_timecode(tc, args.overflow)}")


def _cmd_rates(args):
    print("Standard frame rates:")
    print("-" * 50)
    for rate in all_standard_rates():
        drop = "DF" if rate.is_drop_frame else "NDF"
        print(f"  {rate.kind.value:<14} {rate.frames_per_second:>10.6f} fps  "
              f"nominal {rate.nominal_frame_rate:<3} {drop}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tccalc",
        description="SMPTE timecode calculator.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s convert 1800f -r 29.97df        # Frame count -> 00:01:00;02
  %(prog)s convert 01:00:00:00 -r 25       # Timecode -> 90000 frames
  %(prog)s add 01:00:00:00 5m              # Add a duration
  %(prog)s sub 00:00:00:00 1f -r 30        # Wraps to 23:59:59:29
  %(prog)s diff 01:00:00:00 00:59:00:00    # Signed difference
  %(prog)s mul 00:00:10:00 3               # Multiply a duration
  %(prog)s seq 00:00:59;28 4f -r 29.97df   # Count up across a drop
  %(prog)s rates                           # List standard rates

Value formats:
  01:02:03:04  = timecode (';' before frames for drop frame is optional)
  1234f        = 1234 frames
  01020304     = digit entry (HHMMSSFF, right-aligned)
  123456789    = more than 8 digits is a frame count
  5m, 1h30m    = durations (h/m/s/f notation), also 1:30 = 1 min 30 sec

Frame rates:
  23.976, 24, 25, 29.97df, 29.97 (non-drop), 30, 50, 59.94, 60,
  or any other number for a custom rate
        """,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-r", "--frame-rate",
        type=_frame_rate_arg,
        default=FrameRate.FPS_24,
        help="Frame rate (default: 24)",
    )
    common.add_argument(
        "--overflow",
        action="store_true",
        help="Show hours past 24 instead of wrapping to 00",
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with detailed logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", parents=[common], help="Show a value as timecode, frames and seconds")
    convert.add_argument("value", help="Timecode, frame count or duration")
    convert.set_defaults(func=_cmd_convert)

    for name, func, help_text in (
        ("add", _cmd_add, "A + B (wraps at 24 hours)"),
        ("sub", _cmd_sub, "A - B (wraps below zero)"),
        ("diff", _cmd_diff, "Signed difference A - B"),
    ):
        sub = subparsers.add_parser(name, parents=[common], help=help_text)
        sub.add_argument("a", help="First timecode")
        sub.add_argument("b", help="Second timecode or duration")
        sub.set_defaults(func=func)

    for name, func, help_text in (
        ("mul", _cmd_mul, "Multiply a duration by N"),
        ("div", _cmd_div, "Divide a duration by N"),
    ):
        sub = subparsers.add_parser(name, parents=[common], help=help_text)
        sub.add_argument("a", help="Timecode or duration")
        sub.add_argument("n", type=int, help="Positive integer")
        sub.set_defaults(func=func)

    seq = subparsers.add_parser("seq", parents=[common], help="Print a run of timecodes")
    seq.add_argument("start", help="Starting timecode")
    seq.add_argument("duration", help="Duration (e.g. '10f', '5s', '1:30')")
    seq.add_argument(
        "--countdown",
        action="store_true",
        help="Count down towards zero instead of up",
    )
    seq.add_argument(
        "--step",
        type=int,
        default=1,
        help="Print every Nth timecode (default: 1)",
    )
    seq.set_defaults(func=_cmd_seq)

    rates = subparsers.add_parser("rates", parents=[common], help="List standard frame rates")
    rates.set_defaults(func=_cmd_rates)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        _logger.setLevel(logging.DEBUG)
        _logger.debug(f"Command: {args.command}, frame rate: {args.frame_rate}")

    if getattr(args, "step", 1) <= 0:
        parser.error("--step must be a positive integer")

    try:
        args.func(args)
    except ValueError as e:
        # TimecodeError, or a non-positive multiplier/divisor
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

import argparse
import logging
import sys

from lockdrop.allocation import LockPosition, evaluate, plan_update, transaction_summary
from lockdrop.config import load_params
from lockdrop.logging_utils import configure_logging
from lockdrop.units import format_units, parse_units


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview a lockdrop allocation")
    parser.add_argument("--amount", required=True, help="Proposed lock amount, in whole underlying units")
    parser.add_argument("--duration", type=int, required=True, help="Proposed lock duration in months")
    parser.add_argument("--current-amount", default="0", help="Currently locked amount, in whole units")
    parser.add_argument("--current-duration", type=int, default=0, help="Current lock duration in months")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        params = load_params()
        current = LockPosition(parse_units(args.current_amount, params.underlying_decimals), args.current_duration)
        proposed = LockPosition(parse_units(args.amount, params.underlying_decimals), args.duration)
        result = evaluate(params, current, proposed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Weight: {result.weight}")
    print(f"Max Weight: {params.max_weight}")
    print(f"Reward: {format_units(result.reward_amount, params.reward_decimals, grouping=True)} {params.reward_symbol}")
    print(f"Allocation: {result.allocation_percent:.6f}%")
    if result.is_valid:
        update = plan_update(current, proposed)
        print("Nothing to update" if update.is_noop else transaction_summary(params, proposed, result))
    else:
        print(f"Invalid: {result.error_reason.value}")
    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
import sys
from decimal import Decimal
from typing import Optional

import simplejson

from onbalance import config
from onbalance.bars import load_bars
from onbalance.indicators import Obv
from onbalance.logging import configure as configure_logging
from onbalance.primitives import Timestamp_
from onbalance.replay import replay, stream

_log = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="onbalance", description="Replays bars from a file through an OBV accumulator."
    )
    parser.add_argument("bars", help="JSON or YAML file with a list of {time, close, volume}")
    parser.add_argument("-c", "--config", help="JSON or YAML config file")
    parser.add_argument("-n", "--name", default="OBV")
    parser.add_argument("--start", type=Timestamp_.parse, help="skip bars before this time")
    parser.add_argument(
        "--seed", type=Decimal, help="running total assigned right after the first bar"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _parser().parse_args(argv)

    try:
        configure_logging(config.load(args.config))
        bars = load_bars(args.bars)
    except (OSError, ValueError) as exc:
        _log.error(f"unable to start replay: {exc}")
        return 1

    if args.start is not None:
        bars = [b for b in bars if b.time >= args.start]
    _log.info(f"replaying {len(bars)} bar(s) from {args.bars}")

    obv = Obv(args.name)
    values: list[Decimal] = []
    try:
        values += replay(obv, bars[:1])
        if args.seed is not None and values:
            obv.value = args.seed
        for value in stream(obv, bars[1:]):
            values.append(value)
    except ValueError as exc:
        _log.error(f"replay stopped at bar {len(values)}: {exc}")
        return 1

    for bar, value in zip(bars, values):
        print(
            simplejson.dumps({"time": Timestamp_.format(bar.time), "obv": value}, use_decimal=True)
        )
    _log.info(f"{obv.name} final value: {obv.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

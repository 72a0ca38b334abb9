"""Command-line control panel: set the diagram parameters, prepare and run it."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from fbdsim.simulator import Simulator


def _ranged(kind: Callable[[str], float], low: float, high: float) -> Callable[[str], float]:
    def parse(text: str) -> float:
        try:
            value = kind(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid value: {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{value} is outside [{low}, {high}]")
        return value

    return parse


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fbdsim", description="Run the function-block diagram simulation."
    )
    parser.add_argument("--input", default="wejscie.txt", help="file with input data")
    parser.add_argument("--output", default="wyjscie.txt", help="file for the results")
    parser.add_argument("--amplitude", type=_ranged(float, 0.1, 1000), default=5.0)
    parser.add_argument("--period", type=_ranged(int, 1, 1000), default=20)
    parser.add_argument("--constant", type=_ranged(float, -1000, 1000), default=1.0)
    parser.add_argument("--signs", default="-+++", help="exactly four '+' or '-' signs")
    parser.add_argument("--gain", type=_ranged(float, -1000, 1000), default=0.1)
    parser.add_argument(
        "--interval", type=float, default=0.5, help="seconds between simulation steps"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Prepare the diagram from the options and run it until the input is used up."""
    args = _parser().parse_args(argv)

    if len(args.signs) != 4:
        print(">> CRITICAL ERROR: the add/sub signs must be EXACTLY 4 characters (e.g. -+++)!")
        return 1

    print(
        f">> Building. Input file: {args.input}, Output file: {args.output}, "
        f"Amplitude: {args.amplitude:g}, Period: {args.period}, "
        f"Constant: {args.constant:g}, AddSub signs: {args.signs}, Gain: {args.gain:g}"
    )

    with Simulator(on_message=print) as simulator:
        simulator.prepare(
            input_path=args.input,
            output_path=args.output,
            constant=args.constant,
            amplitude=args.amplitude,
            period=args.period,
            signs=args.signs,
            gain=args.gain,
        )
        print(">> Starting the simulation.")
        simulator.run(max(args.interval, 0.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Named parameters, generated ranges, progress bar and Ctrl-C reporting.

Prints a report and a runtime estimate before asking to proceed. While
the sweep runs, pressing Ctrl-C prints the best parameters found so far.
"""

import argparse
import logging
import time

from paramsweep import (
    ParameterPermutator,
    ProgressBar,
    install_interrupt_handler,
    linspace_by_count,
    linspace_by_step,
)


def score(b: bool, i: int, f: float, d: float) -> float:
    time.sleep(0.1)
    if b:
        return i * f * d
    return i + f + d


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    parser.add_argument("--rate", type=float, default=10.0,
                        help="expected evaluations per second, for the estimate")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pp = ParameterPermutator.from_named(
        score,
        [
            ("b", [True, False]),
            ("i", linspace_by_count(0, 10, 10)),
            ("f", linspace_by_step(0.0, 1.0, 0.1)),
            ("d", [0.5, 2.0]),
        ],
        config={"record_history": True},
    )

    print(pp.report())
    minutes = pp.total_permutations() / args.rate / 60
    print(f"\nEstimated time to run: {minutes:.1f} minutes")
    if not args.yes and input("\nProceed? y/n: ").strip().lower() != "y":
        return

    pp.set_progress_callback(ProgressBar())
    install_interrupt_handler()

    results = pp.run()
    print(results.summary(top_n=5))


if __name__ == "__main__":
    main()

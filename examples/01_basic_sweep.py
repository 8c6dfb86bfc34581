"""Basic parameter sweep.

Tries every combination of four parameters and prints the one with the
highest score. The scoring function's annotations fix the kind of each
parameter.
"""

from paramsweep import ParameterPermutator


def score(b: bool, i: int, f: float, d: float) -> float:
    if b:
        return i * f * d
    return i + f + d


def main():
    pp = ParameterPermutator(
        score,
        [
            [True, False],   # candidates for the first parameter
            [1, 2, 3],       # second
            [10.0, 20.0],
            [0.5, 2.0],
        ],
    )

    pp.run()
    print(f"best score: {pp.best_score}")
    print(f"best parameters: {pp.to_string(pp.best_parameters)}")
    # best score: 120.0
    # best parameters: {P0=true, P1=3, P2=20.000000, P3=2.000000, }


if __name__ == "__main__":
    main()

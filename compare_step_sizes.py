"""Quick step-size sensitivity study for the recursive forward difference.

Run with:
    python compare_step_sizes.py

For each test function the derivative is estimated with step sizes from
1e-1 down to 1e-16. The error first shrinks with h (truncation error) and
then grows again once cancellation dominates.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from forwardkit.stepsize import scan_stepsizes
from forwardkit.utils.numerics import count_function_evaluations, relative_error
from forwardkit.utils.sandbox import generate_test_function


def main() -> None:
    """Main comparison routine."""
    f_sq, df_sq = generate_test_function("square")
    f_sin, df_sin = generate_test_function("sin")
    f_exp, df_exp = generate_test_function("exp")

    cases: list[dict[str, Any]] = [
        {
            "name": "x^2",
            "order": 1,
            "f": f_sq,
            "exact": lambda x: df_sq(x),
            "x0_grid": [[1.0], [2.0]],
        },
        {
            "name": "x^3",
            "order": 2,
            "f": lambda x: x[0] ** 3,
            "exact": lambda x: 6.0 * x[0],
            "x0_grid": [[1.0]],
        },
        {
            "name": "sin(x) + sin(y)",
            "order": 1,
            "f": f_sin,
            "exact": lambda x: df_sin(x),
            "x0_grid": [[0.3, 1.1]],
        },
        {
            "name": "exp(x) + exp(y) + exp(z)",
            "order": 1,
            "f": f_exp,
            "exact": lambda x: df_exp(x),
            "x0_grid": [[0.0, 0.5, -0.5]],
        },
    ]

    stepsizes = np.logspace(-1, -16, 16)
    line = "-" * 80

    for case in cases:
        print(line)
        print(f"Function: {case['name']!r}, order: {case['order']}")
        print(line)

        for x0 in case["x0_grid"]:
            truth = float(case["exact"](np.asarray(x0, dtype=float)))
            n_evals = count_function_evaluations(case["order"], len(x0))
            hs, est, err = scan_stepsizes(
                case["f"], x0, case["order"], stepsizes, exact=truth
            )
            print(f"\nx0 = {x0}, analytic = {truth:.12g}, evaluations per h = {n_evals}")
            print("  {:>10s}  {:>20s}  {:>14s}  {:>14s}".format("h", "estimate", "abs_err", "rel_err"))
            print("  " + "-" * 64)
            for h, e, a in zip(hs, est, err):
                print(f"  {h:10.1e}  {e:20.12e}  {a:14.4e}  {relative_error(e, truth):14.4e}")

        print()


if __name__ == "__main__":
    main()

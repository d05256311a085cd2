"""Example: the ambiguous case (two sides and a non-included angle)."""

from trisolve import solve


def main() -> None:
    for params in ({"a": 7, "alpha": 30, "b": 10}, {"a": 10, "alpha": 30, "b": 7}, {"a": 3, "alpha": 30, "b": 10}):
        result = solve(params)
        print(f"Input: {result.params}")
        if result.error is not None:
            print(f"  error: {result.error}")
            continue
        for idx, solution in enumerate(result.solutions):
            print(
                f"  [{idx}] beta={solution.beta:.4f} gamma={solution.gamma:.4f} c={solution.c:.4f}"
            )


if __name__ == "__main__":
    main()

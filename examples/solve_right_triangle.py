"""Example: solve a right triangle from two sides and the included angle."""

from trisolve import solve


def main() -> None:
    result = solve({"a": 3, "b": 4, "gamma": 90})
    print("Mode:", result.mode)
    for solution in result.solutions:
        print(f"c = {solution.c:.6f}")
        print(f"alpha = {solution.alpha:.6f}, beta = {solution.beta:.6f}")
        print(f"area = {solution.area:.6f}")
        print(f"incircle r = {solution.incircle.radius:.6f}")
        print(f"circumcircle R = {solution.circumcircle.radius:.6f}")


if __name__ == "__main__":
    main()

"""Example: solve a triangle from its vertices and draw it."""

import sys

from trisolve import solve_points
from trisolve.plotting import render_solution


def main() -> None:
    result = solve_points([-1, 2.1], {"x": 3, "y": 2}, {"X": 4, "Y": -1})
    solution = result.solutions[0]
    print(f"Sides: BC={solution.side_bc:.6f} CA={solution.side_ca:.6f} AB={solution.side_ab:.6f}")
    print(f"Angles: A={solution.angle_a:.6f} B={solution.angle_b:.6f} C={solution.angle_c:.6f}")
    print(f"Centroid: ({solution.centroid.x:.6f}, {solution.centroid.y:.6f})")
    incenter = solution.incircle.center
    circumcenter = solution.circumcircle.center
    print(f"Incircle: r={solution.incircle.radius:.6f} at ({incenter.x:.6f}, {incenter.y:.6f})")
    print(
        f"Circumcircle: R={solution.circumcircle.radius:.6f} "
        f"at ({circumcenter.x:.6f}, {circumcenter.y:.6f})"
    )
    if len(sys.argv) > 1:
        print(f"Plot written to {render_solution(result, sys.argv[1])}")


if __name__ == "__main__":
    main()

import math

import pytest

from trisolve import solve, solve_points
from trisolve.plotting import layout_vertices, render_solution
from trisolve.units import AngleUnit


def test_layout_vertices_reproduces_side_lengths():
    (solution,) = solve(a=3, b=4, c=5).solutions

    vertices = layout_vertices(solution, AngleUnit.DEG)

    assert vertices['A'].as_tuple() == (0.0, 0.0)
    assert vertices['B'].as_tuple() == (5.0, 0.0)
    bc = math.hypot(vertices['B'].x - vertices['C'].x, vertices['B'].y - vertices['C'].y)
    assert bc == pytest.approx(3.0)
    assert vertices['C'].x == pytest.approx(3.2)
    assert vertices['C'].y == pytest.approx(2.4)


def test_render_point_result(tmp_path):
    result = solve_points([-2, -2], [2, 1], [0, 5])

    output = render_solution(result, tmp_path / 'points.png')

    assert output.exists()
    assert output.stat().st_size > 0


def test_render_second_ambiguous_solution(tmp_path):
    result = solve(a=7, alpha=30, b=10)

    output = render_solution(result, tmp_path / 'nested' / 'ssa.png', index=1, title='obtuse')

    assert output.exists()


def test_render_requires_a_solution(tmp_path):
    with pytest.raises(ValueError):
        render_solution(solve(a=1, b=2, c=10), tmp_path / 'none.png')

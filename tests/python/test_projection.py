from __future__ import annotations

import math

from vecalg.vector import Vec, project, reflect


def test_project_onto_zero_vector_is_zero():
    result = project(Vec(1, 1, 1), Vec(0, 0, 0))
    assert result == Vec(0, 0, 0)
    assert not any(math.isnan(c) for c in result)


def test_project_onto_axis():
    assert project(Vec(2, 3, 0), Vec(1, 0, 0)) == Vec(2, 0, 0)
    assert project(Vec(2, 3, 0), Vec(5, 0, 0)).is_equal_with_tolerance(Vec(2, 0, 0), 1e-12)


def test_project_onto_oblique_vector():
    result = project(Vec(1, 0, 0), Vec(1, 1, 0))
    assert result.is_equal_with_tolerance(Vec(0.5, 0.5, 0), 1e-12)


def test_reflect_across_normal():
    assert reflect(Vec(1, -1, 0), Vec(0, 1, 0)) == Vec(1, 1, 0)
    assert reflect(Vec(1, -1, 0), Vec(0, 3, 0)).is_equal_with_tolerance(Vec(1, 1, 0), 1e-12)


def test_reflect_with_zero_normal_returns_input():
    v = Vec(1, -1, 2)
    assert reflect(v, Vec()) == v


def test_mutating_project_and_reflect():
    v = Vec(3, 4, 0)
    assert v.project(Vec(0, 2, 0)) is v
    assert v == Vec(0, 4, 0)

    w = Vec(1, -1, 0)
    assert w.reflect(Vec(0, 1, 0)) is w
    assert w == Vec(1, 1, 0)

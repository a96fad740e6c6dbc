import numpy as np
import pytest

from odeconv import (
    CauchyProblem,
    ExactSolutionScheme,
    ForwardDifferenceScheme,
    GridIndexError,
    RecurrenceError,
    SchemeKind,
    TwoStepScheme,
    UniformGrid,
    exact_solution,
    make_scheme,
    rhs,
)


def _g(x):
    return np.exp(x) * np.cos(x)


def test_forward_difference_first_step():
    g = UniformGrid(0.3, 2.3, 21)
    y0 = 0.5
    y1 = ForwardDifferenceScheme().compute(1, g, {0: y0})
    assert y1 == _g(g.get(0)) * g.step + y0


def test_forward_difference_uses_previous_point():
    g = UniformGrid(0.0, 1.0, 11)
    conds = {0: 0.0, 1: 0.2, 2: 0.7}
    y3 = ForwardDifferenceScheme().compute(3, g, conds)
    assert y3 == _g(g.get(2)) * g.step + 0.7


def test_two_step_scheme():
    g = UniformGrid(0.0, 1.0, 11)
    y0, y1 = 0.25, 0.4
    y2 = TwoStepScheme().compute(2, g, {0: y0, 1: y1})
    assert y2 == 2.0 * g.step * _g(g.get(1)) + y0


def test_exact_scheme_ignores_previous_values():
    g = UniformGrid(0.7, 1.7, 6)
    scheme = ExactSolutionScheme()
    y = scheme.compute(3, g, {0: 1.2, 1: 99.0, 2: -99.0})
    assert np.isclose(y, exact_solution(g.get(3), 0.7, 1.2))


@pytest.mark.parametrize("x0", [0.0, 0.7, -1.3])
def test_exact_solution_reproduces_initial_value(x0):
    assert np.isclose(exact_solution(x0, x0, 0.0), 0.0, atol=1e-12)
    assert np.isclose(exact_solution(x0, x0, 2.5), 2.5)


def test_exact_solution_solves_the_equation():
    x = np.linspace(0.0, 4.0, 401)
    y = exact_solution(x, 0.0, 0.0)
    # 中心差分近似 y'，和 g(x) 对比
    dy = np.gradient(y, x, edge_order=2)
    assert np.allclose(dy, rhs(x), rtol=1e-3, atol=1e-3)


@pytest.mark.parametrize("scheme", [ForwardDifferenceScheme(), TwoStepScheme(), ExactSolutionScheme()])
def test_recompute_condition_point_is_rejected(scheme):
    g = UniformGrid(0.0, 1.0, 11)
    conds = {0: 0.0, 1: 0.1}
    with pytest.raises(RecurrenceError):
        scheme.compute(1, g, conds)
    with pytest.raises(RecurrenceError):
        scheme.compute(0, g, conds)


@pytest.mark.parametrize("scheme", [ForwardDifferenceScheme(), TwoStepScheme(), ExactSolutionScheme()])
def test_index_beyond_grid_is_rejected(scheme):
    g = UniformGrid(0.0, 1.0, 5)
    conds = {0: 0.0, 1: 0.1}
    with pytest.raises(GridIndexError):
        scheme.compute(5, g, conds)
    with pytest.raises(GridIndexError):
        scheme.compute(17, g, conds)


def test_missing_previous_value_is_rejected():
    g = UniformGrid(0.0, 1.0, 11)
    with pytest.raises(RecurrenceError):
        ForwardDifferenceScheme().compute(3, g, {0: 0.0})
    with pytest.raises(RecurrenceError):
        TwoStepScheme().compute(4, g, {0: 0.0, 1: 0.1})
    # 两步格式至少要两个已知值
    with pytest.raises(RecurrenceError):
        TwoStepScheme().compute(1, g, {0: 0.0})


@pytest.mark.parametrize("conds", [{}, {1: 0.0}, {0: 0.0, 2: 0.1}, {0: 0.0, 1.0: 0.1}])
def test_malformed_conditions_are_rejected(conds):
    g = UniformGrid(0.0, 1.0, 11)
    with pytest.raises(RecurrenceError):
        ForwardDifferenceScheme().compute(5, g, conds)


def test_compute_does_not_touch_conditions():
    g = UniformGrid(0.0, 1.0, 11)
    conds = {0: 0.0}
    ForwardDifferenceScheme().compute(1, g, conds)
    assert conds == {0: 0.0}


def test_make_scheme_dispatch():
    assert isinstance(make_scheme(SchemeKind.FIRST_ORDER), ForwardDifferenceScheme)
    assert isinstance(make_scheme(SchemeKind.SECOND_ORDER), TwoStepScheme)
    assert isinstance(make_scheme(SchemeKind.EXACT), ExactSolutionScheme)
    assert make_scheme(SchemeKind.FIRST_ORDER).order == 1
    assert make_scheme(SchemeKind.SECOND_ORDER).lookback == 2
    assert make_scheme(SchemeKind.EXACT).order is None
    with pytest.raises(ValueError):
        make_scheme("first")


def test_custom_rhs():
    g = UniformGrid(0.0, 1.0, 5)
    scheme = ForwardDifferenceScheme(rhs=lambda x: 2.0)
    assert np.isclose(scheme.compute(1, g, {0: 1.0}), 1.5)


def test_problem_initial_conditions():
    g = UniformGrid(0.0, 1.0, 11)
    problem = CauchyProblem(x0=0.0, y0=0.0)
    assert problem.initial_conditions(g) == {0: 0.0}

    conds = problem.initial_conditions(g, points=2)
    assert sorted(conds) == [0, 1]
    assert np.isclose(conds[1], exact_solution(0.1, 0.0, 0.0))

    with pytest.raises(ValueError):
        problem.initial_conditions(g, points=0)
    with pytest.raises(ValueError):
        CauchyProblem(x0=0.5).initial_conditions(g)

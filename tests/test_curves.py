import pytest

from bezierpad.core import CurveEvaluator, de_casteljau, evaluate

QUADRATIC = [(0.0, 0.0), (1.0, 2.0), (2.0, 0.0)]


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_endpoints_are_interpolated(n: int) -> None:
    pts = [(float(i * 10), float((i * 37) % 11)) for i in range(n)]
    samples = evaluate(pts, 50)
    assert len(samples) == 51
    assert samples[0] == pytest.approx(pts[0])
    assert samples[-1] == pytest.approx(pts[-1])


@pytest.mark.parametrize("pts", [[], [(1.0, 1.0)]])
def test_fewer_than_two_points_gives_empty_curve(pts) -> None:
    assert evaluate(pts, 100) == []


def test_two_points_give_a_straight_line() -> None:
    samples = evaluate([(0.0, 0.0), (10.0, 20.0)], 4)
    assert samples == pytest.approx([(0.0, 0.0), (2.5, 5.0), (5.0, 10.0), (7.5, 15.0), (10.0, 20.0)])


def test_quadratic_midpoint() -> None:
    assert de_casteljau(QUADRATIC, 0.5) == pytest.approx((1.0, 1.0))


def test_single_sample_step_hits_both_ends() -> None:
    samples = evaluate(QUADRATIC, 1)
    assert samples == pytest.approx([QUADRATIC[0], QUADRATIC[-1]])


@pytest.mark.parametrize("bad", [0, -3, 2.5, True])
def test_non_positive_sample_count_is_rejected(bad) -> None:
    with pytest.raises(ValueError):
        evaluate(QUADRATIC, bad)
    with pytest.raises(ValueError):
        CurveEvaluator(bad)


def test_de_casteljau_needs_a_point() -> None:
    with pytest.raises(ValueError):
        de_casteljau([], 0.5)


def test_evaluator_binds_sample_count() -> None:
    evaluator = CurveEvaluator(10)
    assert len(evaluator(QUADRATIC)) == 11
    assert evaluator.evaluate(QUADRATIC) == evaluate(QUADRATIC, 10)


def test_fixed_step_policy() -> None:
    evaluator = CurveEvaluator.from_step(1e-4)
    assert evaluator.sample_count == 10000
    samples = evaluator(QUADRATIC)
    assert len(samples) == 10001
    assert samples[-1] == pytest.approx(QUADRATIC[-1])
    with pytest.raises(ValueError):
        CurveEvaluator.from_step(0.0)

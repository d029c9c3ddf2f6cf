"""Planes and the benchmark runner."""
import random

import pytest

from numkernel.names import *
from numkernel.errors import DimensionMismatchError
from numkernel.fraction import Fraction
from numkernel.plane import Plane
from numkernel.vector import Vector
from numkernel.vectorspaces import cosine_angle
from numkernel.benchmark import Benchmark, RunInfo

# =============================================================================
# Planes
# =============================================================================


def test_plane_from_coefficients():
    a, b, c, k = 3.0, 5.0, 9.0, -26.0
    p = Plane(a, b, c, k)
    assert cosine_angle(Vector.from_sequence([3, 5, 9], float), p.normal).unwrap() == 1.0
    point = p.point
    assert a * point[0] + b * point[1] + c * point[2] == pytest.approx(k)
    assert p.get_coefficients() == (a, b, c, k)


@pytest.mark.parametrize("coefficients,point", [
    ((2, 4, 8, 8), [4, 0, 0]),
    ((0, 2, 4, 8), [0, 4, 0]),
    ((0, 0, 4, 8), [0, 0, 2]),
])
def test_plane_point_on_first_nonzero_axis(coefficients, point):
    assert Plane(*coefficients).point.to_list() == point


def test_plane_requires_nonzero_normal():
    with pytest.raises(ValueError):
        Plane(0.0, 0.0, 0.0, 1.0)


def test_plane_exact():
    p = Plane(3, 5, 9, -26, dtype=Fraction)
    assert p.point.to_list() == [Fraction(-26, 3), 0, 0]
    assert p.contains(p.point)
    assert not p.contains(Vector.from_sequence([Fraction(0)] * 3))
    assert p.dtype is Fraction


def test_plane_from_normal_and_point():
    normal = Vector.from_sequence([-4.0, -3.0, 9.0])
    x0 = Vector.from_sequence([-5.0, 3.0, -3.0])
    p = Plane.from_normal_and_point(normal, x0)
    a, b, c, k = p.get_coefficients()
    assert (a, b, c, k) == (-4.0, -3.0, 9.0, -16.0)
    assert cosine_angle(normal, p.normal).unwrap() == 1.0
    assert k == a * p.point[0] + b * p.point[1] + c * p.point[2]
    assert p.contains(x0)
    # the plane keeps its own copies
    normal[0] = 1.0
    assert p.normal[0] == -4.0


def test_plane_from_normal_and_point_dimensions():
    vec = Vector.from_sequence([1.0, 2.0, 3.0, 4.0])
    with pytest.raises(DimensionMismatchError):
        Plane.from_normal_and_point(vec, vec)
    with pytest.raises(ValueError):
        Plane.from_normal_and_point(Vector(3), Vector(3))
    with pytest.raises(DimensionMismatchError):
        Plane(1, 2, 3, 4).contains(vec)


def test_plane_repr():
    assert repr(Plane(1, 2, 3, 4, dtype=int)) == "Plane(1x + 2y + 3z = 4)"


# =============================================================================
# Benchmark
# =============================================================================


def gen_input(input_size):
    return [random.uniform(1.0, 1000.0) for _ in range(input_size)]


def test_run_info_defaults():
    run = RunInfo(100, 10)
    assert run.run_time == -1.0
    assert (run.input_size, run.iterations) == (100, 10)


def test_benchmark_records_all_sizes():
    runs = [RunInfo(100, 1000), RunInfo(200, 1000), RunInfo(300, 1000), RunInfo(400, 2000)]
    bm = Benchmark(gen_input, max, runs)
    assert bm.run() is bm
    infos = bm.get_run_infos()
    assert len(infos) == len(runs)
    for run, (size, info) in zip(runs, infos.items()):
        assert run.input_size == size == info.input_size
        assert run.iterations == info.iterations
        assert info.run_time > 0
    # the run descriptors passed in are not modified
    assert all(run.run_time == -1.0 for run in runs)


def test_benchmark_alternates_inputs():
    """Two inputs are generated per size and used in turn."""
    generated = []
    seen = []

    def input_gen(size):
        generated.append(object())
        return generated[-1]

    Benchmark(input_gen, seen.append, [RunInfo(10, 5)]).run()
    assert len(generated) == 2
    assert seen == [generated[0], generated[1], generated[0], generated[1], generated[0]]


def test_benchmark_rejects_zero_iterations():
    with pytest.raises(ValueError):
        Benchmark(gen_input, max, [RunInfo(10, 0)]).run()


def test_benchmark_sorted_by_size():
    bm = Benchmark(gen_input, max, [RunInfo(30, 2), RunInfo(10, 2), RunInfo(20, 2)]).run()
    assert list(bm.get_run_infos()) == [10, 20, 30]

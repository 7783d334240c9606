import math

import numpy as np
import pytest

from sweepcad.errors import DegenerateInputError
from sweepcad.geom import (
    add,
    cross,
    dist,
    dot,
    epsilon,
    isgoodnum,
    lerp,
    norm,
    normalize,
    skew,
    sub,
    vclose,
    vec3,
)

## unit tests for sweepcad geom.py


def test_epsilon_is_coarse_degeneracy_threshold():
    assert epsilon == 0.01


@pytest.mark.parametrize('v', [[3, 4], [1, 2, 3], [-0.5, 0.02, 7.0], [0.011, 0, 0]])
def test_normalize_has_unit_norm(v):
    n = normalize(v)
    assert len(n) == len(v)
    assert math.isclose(norm(n), 1.0, abs_tol=1e-6)


def test_normalize_rejects_short_vectors():
    with pytest.raises(DegenerateInputError):
        normalize([0.001, 0.0, 0.0])
    with pytest.raises(ZeroDivisionError):
        normalize([0, 0, 0])


def test_dot_and_cross():
    assert dot([1, 2, 3], [4, 5, 6]) == 32
    assert cross([1, 0, 0], [0, 1, 0]) == [0, 0, 1]
    # 2D operands lie in the z=0 plane
    assert cross([1, 0], [0, 1]) == [0, 0, 1]
    with pytest.raises(ValueError):
        cross([1, 2, 3, 4, 5], [1, 0, 0])


def test_component_wise_ops_keep_dimension():
    assert add([1, 2], [3, 4]) == [4, 6]
    assert sub([1, 2, 3], [1, 1, 1]) == [0, 1, 2]
    assert add([1, 2], [1, 1, 1]) == [2, 3, 1]
    assert add(1, 2) == 3
    with pytest.raises(ValueError):
        add(1, [1, 2])


def test_lerp_scalars_and_vectors():
    assert lerp(0.5, 0, 10) == 5
    assert lerp(0.25, [0, 0], [4, 8]) == [1.0, 2.0]
    assert lerp(0, [1, 2, 3], [9, 9, 9]) == [1, 2, 3]
    assert lerp(1, [1, 2, 3], [9, 9, 9]) == [9, 9, 9]


def test_skew_homogeneous_form():
    assert skew([1, 2, 3]) == [[0, -3, 2, 0],
                               [3, 0, -1, 0],
                               [-2, 1, 0, 0],
                               [0, 0, 0, 0]]


def test_skew_times_vector_is_cross_product():
    v = [1.5, -2.0, 0.25]
    x = [0.3, 4.0, -1.0]
    k = skew(v)
    kx = [sum(k[i][j] * x[j] for j in range(3)) for i in range(3)]
    assert vclose(kx, cross(v, x), 1e-12)


def test_vec3_and_distance():
    assert vec3([1, 2]) == [1, 2, 0.0]
    assert vec3([1, 2, 3, 1]) == [1, 2, 3]
    with pytest.raises(ValueError):
        vec3([1])
    assert dist([0, 0], [3, 4]) == 5.0


def test_numpy_numbers_are_good():
    assert isgoodnum(np.float64(1.5))
    assert isgoodnum(np.int64(2))
    assert not isgoodnum(True)
    assert not isgoodnum(np.bool_(True))
    assert vec3(np.array([1, 2])) == [1, 2, 0.0]

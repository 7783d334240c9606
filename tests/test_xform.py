import math

import numpy as np
import pytest

import sweepcad.geom as geom
from sweepcad.xform import *
## unit tests for sweepcad xform.py


def _vclose(a, b, tol=1e-9):
    return geom.dist(a, b) <= tol


class TestXform:
    """unit tests for sweepcad matrix operations"""

    def test_matrix(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        fooT = Matrix(foo,True)
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        baz = [1,2,3]
        I = Matrix()
        a = 10.0
        assert(I.mul(bar).m == bar.m)
        assert(I.mul(foo).m == foo.m)
        assert(I.mul(fooT).m == fooT.mul(I).m)
        assert(I.mul(I).m == I.m)
        assert(foo.mul(bar).m == [[1,2,3,10],[5,6,7,26],[9,10,11,42],[13,14,15,58]])
        assert(foo.mul(a).m == [[10.0,20.0,30.0,40.0],
                                [50.0,60.0,70.0,80.0],
                                [90.0,100.0,110.0,120.0],
                                [130.0,140.0,150.0,160.0]])
        assert(I.mul(baz) == baz)
        ## points are homogenized on the way out
        assert(foo.mul(baz) == [18.0/102.0, 46.0/102.0, 74.0/102.0])

    def test_matmul_operator_and_transpose(self):
        foo = Matrix(list(range(16)))
        assert (foo @ Matrix()).m == foo.m
        assert foo.transpose().getrow(0) == foo.getcol(0)

    def test_bad_initialization(self):
        with pytest.raises(ValueError):
            Matrix([1,2,3])
        with pytest.raises(ValueError):
            Matrix([[1,0,0,0],[0,1,0,0],[0,0,1,0],[0,0,0,True]])

    def test_translation(self):
        assert Translation([1,2,3]).mul([0,0,0]) == [1,2,3]
        assert Translation(1,2,3).mul([1,1]) == [2,3,3]
        assert Translation([1,2,3],inverse=True).mul([1,2,3]) == [0,0,0]
        # direction vectors (w=0) ignore translation
        assert Translation([1,2,3]).mul([1,0,0,0]) == [1,0,0]

    def test_numpy_values(self):
        assert _vclose(Translation(np.array([1,2,3])).mul([0,0,0]),[1,2,3])
        assert _vclose(Translation(np.int64(1),np.int64(2),np.int64(3)).mul([0,0,0]),[1,2,3])
        m = Matrix()
        m.set(0,3,np.float64(2.5))
        assert m.get(0,3) == 2.5
        with pytest.raises(ValueError):
            m.set(0,3,np.bool_(True))

    def test_principal_rotations(self):
        assert _vclose(RotationZ(90).mul([1,0,0]),[0,1,0])
        assert _vclose(RotationX(90).mul([0,1,0]),[0,0,1])
        assert _vclose(RotationY(90).mul([0,0,1]),[1,0,0])
        assert _vclose(RotationZ(90,inverse=True).mul([0,1,0]),[1,0,0])

    def test_axis_rotation_matches_principal(self):
        assert Rotation([0,0,1],37.0).isclose(RotationZ(37.0))
        assert Rotation([2,0,0],-12.5).isclose(RotationX(-12.5))
        with pytest.raises(ValueError):
            Rotation([0,0,0],10)

    def test_scale(self):
        assert Scale(2).mul([1,1,1]) == [2,2,2]
        assert Scale([2,3]).mul([1,1,1]) == [2,3,1]
        assert Scale(1,2,3).mul([1,1,1]) == [1,2,3]
        assert Scale([2,4,8],inverse=True).mul([2,4,8]) == [1,1,1]
        with pytest.raises(ValueError):
            Scale('big')

    def test_compose_order(self):
        m = compose(Translation([1,0,0]),Scale(2))
        assert m.mul([1,0,0]) == [3,0,0]
        assert compose().isclose(Matrix())

    def test_apply_one_and_many(self):
        m = Translation([0,0,5])
        assert apply_one(m,[1,1,1]) == [1,1,6]
        assert apply_many(m,[[0,0],[1,0]]) == [[0,0,5],[1,0,5]]


class TestAlign:

    @pytest.mark.parametrize('to,frm', [
        ([1,0,0],[0,0,1]),
        ([1,2,3],[0,0,1]),
        ([-3,0.5,2],[1,1,0]),
        ([0,1,-1],[1,0,0]),
        ([0.2,-0.7,-0.1],[5,1,2]),
    ])
    def test_align_maps_from_onto_to(self,to,frm):
        R = Align(to,frm)
        image = R.mul(list(frm) + [0])
        assert geom.norm(geom.cross(image,to)) < 1e-6
        assert geom.dot(image,to) > 0

    def test_align_is_a_rotation(self):
        R = Align([1,2,3])
        RRt = R.mul(R.transpose())
        assert RRt.isclose(Matrix(),1e-9)

    def test_default_from_is_z(self):
        assert _vclose(Align([1,0,0]).mul([0,0,1,0]),[1,0,0])

    def test_parallel_is_identity(self):
        assert Align([0,0,3]).isclose(Matrix())

    def test_zero_direction_is_identity(self):
        assert Align([0,0,0]).isclose(Matrix())
        assert Align([1,0,0],[0,0,0]).isclose(Matrix())

    def test_short_directions_are_aligned(self):
        assert _vclose(Align([0.005,0,0]).mul([0,0,1,0]),[1,0,0])
        assert _vclose(Align([1,0,0],[0,0.001,0]).mul([0,1,0,0]),[1,0,0])

    def test_antiparallel(self):
        R = Align([0,0,-1])
        assert _vclose(R.mul([0,0,1,0]),[0,0,-1])
        assert Align([0,0,-1],antiparallel='identity').isclose(Matrix())
        with pytest.raises(ValueError):
            Align([0,0,-1],antiparallel='mirror')


class TestCenter:

    def test_centered(self):
        assert Center([2,4,6],True).translation() == [-1,-2,-3]

    def test_corner_anchored(self):
        assert Center([2,4,6],False).translation() == [0,0,0]

    def test_negative_extent_moves_box(self):
        assert Center([2,-4,6],False).translation() == [0,-4,0]
        assert Center([2,-4,6],[True,False,False]).translation() == [-1,-4,0]
        assert Center([2,-4,6],[False,True,False]).translation() == [0,-2,0]

    def test_bad_flags(self):
        with pytest.raises(ValueError):
            Center([1,1,1],'yes')

import pytest

from sweepcad.engine import native
from sweepcad.errors import DegenerateInputError
from sweepcad.frames import Orientation, duplicated_frames, simple_frames
from sweepcad.shapes import box
from sweepcad.sweep import apply_many, apply_one, duplicate, path_sweep, sweep
from sweepcad.xform import Translation


@pytest.fixture
def cube():
    return native.emit_primitive('box', size=[1, 1, 1])


@pytest.fixture
def line_frames():
    return simple_frames([[0, 0, 0], [2, 0, 0], [6, 0, 0], [10, 0, 0]])


def test_apply_one(cube):
    moved = apply_one(Translation([1, 2, 3]), cube)
    assert native.bbox(moved) == [[1, 2, 3], [2, 3, 4]]


def test_apply_many(cube, line_frames):
    copies = apply_many(line_frames, cube)
    assert len(copies) == 4
    assert [native.bbox(c)[0][0] for c in copies] == [0, 2, 6, 10]


def test_duplicate_unions_copies(cube, line_frames):
    result = duplicate(line_frames, cube)
    assert result[1] == 'union'
    assert len(result[3]) == 4
    assert native.count(result, 'multmatrix') == 4


def test_duplicate_without_union(cube, line_frames):
    copies = duplicate(line_frames, cube, union=False)
    assert isinstance(copies, list)
    assert all(c[1] == 'multmatrix' for c in copies)


def test_duplicate_needs_frames(cube):
    with pytest.raises(DegenerateInputError):
        duplicate([], cube)


def test_sweep_chains_every_pair(cube, line_frames):
    result = sweep(line_frames, cube)
    assert native.count(result, 'hull') == 3
    assert native.bbox(result) == [[0, 0, 0], [11, 1, 1]]


def test_sweep_without_chamfer_hulls_pairs(cube, line_frames):
    result = sweep(line_frames, cube, chamfer=False)
    assert native.count(result, 'hull') == 2


def test_sweep_needs_two_frames(cube, line_frames):
    with pytest.raises(DegenerateInputError):
        sweep(line_frames[:1], cube)


def test_sweep_duplicated_frames(cube):
    frames = duplicated_frames([[0, 0, 0], [5, 0, 0], [5, 5, 0]])
    result = sweep(frames, cube, chamfer=False)
    assert native.count(result, 'hull') == 2


def test_path_sweep_picks_chamfer_from_policy():
    template = box(1, center=True)
    ell = [[0, 0, 0], [5, 0, 0], [5, 5, 0]]
    assert native.count(path_sweep(ell, template), 'hull') == 2
    assert native.count(path_sweep(ell, template, Orientation.DUPLICATED), 'hull') == 2
    assert native.count(path_sweep(ell, template, Orientation.DUPLICATED, chamfer=True), 'hull') == 3
    assert native.count(path_sweep(ell, template, curve='linear', segments=2), 'hull') == 4


def test_engine_by_name(cube, line_frames):
    by_name = sweep(line_frames, cube, engine='native')
    by_module = sweep(line_frames, cube, engine=native)
    assert native.bbox(by_name) == native.bbox(by_module)
    assert native.count(by_name, 'hull') == native.count(by_module, 'hull')

import geoprim3d
from geoprim3d import Cube, DegenerateState, InvalidArgument, Line, Vector3


def test_public_surface():
    for name in geoprim3d.__all__:
        assert hasattr(geoprim3d, name)
    assert isinstance(geoprim3d.__version__, str)


def test_end_to_end():
    cube = Cube.from_center_and_side(Vector3(0, 0, 0), 2.0).unwrap()
    bottom = cube.edges()[0]
    diagonal = Line.from_point_and_direction(Vector3(0, 0, 5), Vector3(1, 1, 0)).unwrap()
    assert bottom.shortest_distance_to(diagonal) > 0
    assert issubclass(InvalidArgument, ValueError)
    assert issubclass(DegenerateState, ValueError)


def test_sink_functions_are_documented():
    from geoprim3d import diagnostics
    for name in ('get_sink', 'set_sink', 'reset_sink', 'use_sink',
                 'notify', 'info', 'warning', 'severe'):
        assert getattr(diagnostics, name).__doc__, name

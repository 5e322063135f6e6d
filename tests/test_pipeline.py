"""End-to-end tests for the Voronoi map pipeline."""

import pytest
from shapely.geometry import Point, Polygon

from py_vmap.config import settings
from py_vmap.core.bounds import DataBounds
from py_vmap.core.exceptions import InvalidInput
from py_vmap.core.parsing import parse_points
from py_vmap.core.pipeline import create_voronoi
from py_vmap.core.points import RawPoint
from py_vmap.core.renderer import CELL_GROUP, MAIN_POINTS_GROUP, SQUIGGLY_POINTS_GROUP
from py_vmap.core.scene import CircleElement, PathElement, Scene

UNIT_SQUARE = "x,y\n0,0\n10,0\n0,10\n10,10"


def circles(scene, class_name):
    return [(c.cx, c.cy, c.fill) for c in scene.select(class_name)[0].children
            if isinstance(c, CircleElement)]


class TestUnitSquare:
    """Four corners of a square."""

    @pytest.fixture(scope="class")
    def voronoi_map(self):
        return create_voronoi(parse_points(UNIT_SQUARE), seed="square")

    def test_bounds(self, voronoi_map):
        assert voronoi_map.bounds == DataBounds(min_x=0, min_y=0, max_x=10, max_y=10)

    def test_four_cells(self, voronoi_map):
        assert len(voronoi_map.cells) == 4
        assert len(voronoi_map.scene.select(CELL_GROUP)[0].children) == 4

    def test_each_cell_holds_its_point(self, voronoi_map):
        for point, cell in zip(voronoi_map.points, voronoi_map.cells):
            assert Polygon(cell).contains(Point(point))

    def test_scaled_corners(self, voronoi_map):
        assert [tuple(p) for p in voronoi_map.points] == [
            (125.0, 375.0), (375.0, 375.0), (125.0, 125.0), (375.0, 125.0),
        ]

    def test_circles(self, voronoi_map):
        black = circles(voronoi_map.scene, MAIN_POINTS_GROUP)
        red = circles(voronoi_map.scene, SQUIGGLY_POINTS_GROUP)
        assert len(black) == 4
        assert all(fill == "black" for _, _, fill in black)
        assert len(red) == len(voronoi_map.squiggly_points)
        assert all(fill == "red" for _, _, fill in red)

    def test_canvas_size(self, voronoi_map):
        assert voronoi_map.scene.size == (500, 500)


class TestSinglePoint:
    """A single point uses the constant-scale policy."""

    def test_bounds_and_marker(self):
        voronoi_map = create_voronoi(parse_points("x,y\n5,5"), seed="single")
        assert voronoi_map.bounds == DataBounds(5, 5, 5, 5)
        black = circles(voronoi_map.scene, MAIN_POINTS_GROUP)
        assert black == [(250.0, 250.0, "black")]
        assert len(voronoi_map.cells) == 1

    def test_cell_covers_extent_without_squiggly(self):
        voronoi_map = create_voronoi(parse_points("x,y\n5,5"), density=0)
        assert voronoi_map.squiggly_points == []
        assert Polygon(voronoi_map.cells[0]).area == pytest.approx(500 * 500)


class TestRerender:
    """Repeated runs rebuild the scene from scratch."""

    def test_real_points_identical_between_runs(self):
        first = create_voronoi(parse_points(UNIT_SQUARE), seed="one")
        second = create_voronoi(parse_points(UNIT_SQUARE), seed="two")
        assert circles(first.scene, MAIN_POINTS_GROUP) == circles(second.scene, MAIN_POINTS_GROUP)

    def test_same_seed_same_svg(self):
        first = create_voronoi(parse_points(UNIT_SQUARE), seed="fixed")
        second = create_voronoi(parse_points(UNIT_SQUARE), seed="fixed")
        assert first.to_svg() == second.to_svg()

    def test_random_seed_reported(self):
        voronoi_map = create_voronoi(parse_points(UNIT_SQUARE))
        assert voronoi_map.seed

    def test_scene_cleared_and_reused(self):
        scene = Scene(100, 100)
        scene.append_group("stale").append(CircleElement(1, 1))

        voronoi_map = create_voronoi(parse_points(UNIT_SQUARE), scene=scene, seed="reuse")
        assert voronoi_map.scene is scene
        assert scene.size == (500, 500)
        assert [g.class_name for g in scene.groups] == [
            CELL_GROUP, MAIN_POINTS_GROUP, SQUIGGLY_POINTS_GROUP,
        ]

    def test_input_not_mutated(self):
        data = [RawPoint("0", "0"), RawPoint("10", "10")]
        create_voronoi(data, seed="keep")
        assert data == [RawPoint("0", "0"), RawPoint("10", "10")]


class TestPipelineOptions:
    """Overrides and cell attribution."""

    def test_custom_canvas(self):
        voronoi_map = create_voronoi(parse_points(UNIT_SQUARE), width=200, height=100,
                                     seed="small")
        assert voronoi_map.scene.size == (200, 100)
        assert voronoi_map.scales.voronoi.extent == ((0, 0), (200, 100))
        assert tuple(voronoi_map.points[0]) == (50.0, 75.0)

    def test_track_cell_identity_with_duplicate(self):
        data = parse_points("x,y\n0,0\n0,0\n10,10")
        voronoi_map = create_voronoi(data, seed="dup", track_cell_identity=True)
        assert len(voronoi_map.cells) == 2
        assert len(voronoi_map.scene.elements(PathElement)) == 2
        assert voronoi_map.degenerate_count >= 1

    def test_positional_slice_with_duplicate(self):
        data = parse_points("x,y\n0,0\n0,0\n10,10")
        voronoi_map = create_voronoi(data, seed="dup")
        # three surviving cells are taken, the third belongs to a squiggly point
        assert len(voronoi_map.cells) == 3


class TestPipelineErrors:
    """Invalid input produces no diagram."""

    def test_empty_data(self):
        scene = Scene()
        scene.append_group("old")
        with pytest.raises(InvalidInput):
            create_voronoi([], scene=scene)
        assert scene.groups == []

    def test_non_numeric(self):
        with pytest.raises(InvalidInput):
            create_voronoi([RawPoint("a", "1")])

    def test_too_many_points(self, monkeypatch):
        monkeypatch.setattr(settings, "max_points", 2)
        with pytest.raises(InvalidInput, match="Too many points"):
            create_voronoi(parse_points(UNIT_SQUARE))

    def test_too_many_points_clears_scene(self, monkeypatch):
        scene = Scene()
        create_voronoi(parse_points(UNIT_SQUARE), scene=scene, seed="before")
        assert scene.groups

        monkeypatch.setattr(settings, "max_points", 2)
        with pytest.raises(InvalidInput):
            create_voronoi(parse_points(UNIT_SQUARE), scene=scene)
        assert scene.groups == []

    def test_huge_coordinates_render(self):
        voronoi_map = create_voronoi(
            parse_points("x,y\n0,0\n10000000000000000000,5"), seed="huge", density=0
        )
        assert voronoi_map.bounds.max_x == 10 ** 19
        assert len(voronoi_map.cells) == 2

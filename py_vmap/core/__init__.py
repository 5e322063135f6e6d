"""
Core Voronoi map pipeline.
"""

from .bounds import DataBounds, retrieve_data_bounds
from .exceptions import DegenerateGeometry, InvalidInput
from .parsing import parse_points
from .pipeline import VoronoiMap, create_voronoi
from .points import RawPoint, ScaledPoint, scale_points
from .renderer import render
from .scales import LinearScale, Scales, create_scales
from .scene import Scene
from .squiggly import create_squiggly_points, generate_region
from .tessellation import VoronoiTessellator

__all__ = ['DataBounds', 'retrieve_data_bounds', 'DegenerateGeometry', 'InvalidInput',
           'parse_points', 'VoronoiMap', 'create_voronoi', 'RawPoint', 'ScaledPoint',
           'scale_points', 'render', 'LinearScale', 'Scales', 'create_scales', 'Scene',
           'create_squiggly_points', 'generate_region', 'VoronoiTessellator']

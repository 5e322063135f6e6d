"""
py-vmap: Voronoi maps with a squiggly, hand-drawn outer edge.
"""

__version__ = "0.1.0"

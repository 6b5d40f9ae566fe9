"""SHELLFUTURE study areas.

Builds the Mediterranean / Atlantic study-area polygons and renders the
overview map. Use `shellfuture/plot_figures.py` to run it.
"""

__version__ = "0.3.0"

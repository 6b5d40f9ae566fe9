"""Figure plotting package.

Each module in this package renders one figure.
Use `shellfuture/plot_figures.py` to run them.
"""

from .fig1_study_areas import plot as plot_fig1_study_areas

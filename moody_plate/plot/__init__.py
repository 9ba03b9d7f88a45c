"""
Plot Package

3D surface plot output for gnuplot.
"""
from .gnuplot_export import GnuplotExporter, export_gnuplot

__all__ = [
    'GnuplotExporter',
    'export_gnuplot',
]

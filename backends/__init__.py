from backends.base import RenderResult
from backends.gnuplot import plot, render, splot

__all__ = ["RenderResult", "render", "plot", "splot"]

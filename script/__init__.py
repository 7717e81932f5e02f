from script.plot_config import PlotConfig
from script.options import TERMINALS, register_terminal
from script.compiler import compile_script

__all__ = ["PlotConfig", "TERMINALS", "register_terminal", "compile_script"]

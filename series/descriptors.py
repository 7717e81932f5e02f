from dataclasses import dataclass, field


@dataclass
class Series:
    """One data series of a plot.

    ``source`` is either a gnuplot expression (``file=False``) or the path of
    a data file (``file=True``). ``style`` is gnuplot's ``with`` argument and
    ``linetype`` defaults to the series position in the plot.
    """

    source: str
    file: bool = False
    using: tuple[int, ...] = field(default=(1, 2))
    width: float = 2
    style: str = "l"
    linetype: int | None = None
    title: str | None = None

    def clause(self, position: int) -> str:
        """Render the ``plot`` fragment for this series at 1-based ``position``."""
        parts = []
        if self.file:
            parts.append(f'"{self.source}"')
            parts.append("u " + ":".join(str(column) for column in self.using))
        else:
            parts.append(self.source)
        linetype = self.linetype if self.linetype is not None else position
        parts.append(f"w {self.style}")
        parts.append(f"lt {linetype}")
        parts.append(f"lw {self.width}")
        parts.append(f't "{self.title or ""}"')
        return " ".join(parts)

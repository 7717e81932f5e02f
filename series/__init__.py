from series.descriptors import Series
from series.builders import (
    DEFAULT_RANGE,
    SampleRange,
    as_array,
    as_engine_expression,
    as_file,
    as_sampled_function,
    format_rows,
    sample,
)

__all__ = [
    "Series",
    "SampleRange",
    "DEFAULT_RANGE",
    "as_engine_expression",
    "as_file",
    "as_array",
    "as_sampled_function",
    "sample",
    "format_rows",
]

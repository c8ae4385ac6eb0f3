"""
Helpers for turning 2-D numeric blocks into per-trace coordinate vectors.
"""
from enum import Enum
from typing import Any

import numpy as np

from .logging_utils import log_block_info, log_data_preparation


class ArrayTraces(Enum):
    """How traces are laid out in a 2-D block."""

    OVER_COLUMNS = "columns"
    OVER_ROWS = "rows"


def trace_vectors_from(traces_matrix: Any, array_traces: ArrayTraces) -> list[list[Any]]:
    """
    Split a 2-D block into one plain list per trace.

    Args:
        traces_matrix: Anything ``numpy.asarray`` accepts (ndarray, nested
            lists, pandas DataFrame)
        array_traces: ``OVER_COLUMNS`` yields one vector per column,
            ``OVER_ROWS`` one vector per row

    Returns:
        Vectors in original column/row order

    Raises:
        ValueError: If the block is not two-dimensional

    Examples:
        >>> trace_vectors_from([[1, 2], [3, 4], [5, 6]], ArrayTraces.OVER_COLUMNS)
        [[1, 3, 5], [2, 4, 6]]
    """
    block = np.asarray(traces_matrix)
    if block.ndim != 2:
        raise ValueError(
            f"Expected a 2-D block of trace data, got {block.ndim} dimension(s) "
            f"with shape {block.shape}"
        )

    log_block_info(block, "Trace block")

    with log_data_preparation(f"Splitting {block.shape} block over {array_traces.value}"):
        if array_traces is ArrayTraces.OVER_COLUMNS:
            return [block[:, j].tolist() for j in range(block.shape[1])]
        return [block[i, :].tolist() for i in range(block.shape[0])]

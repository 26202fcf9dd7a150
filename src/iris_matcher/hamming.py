"""
Normalized Hamming distance between iris codes.

The distance is the fraction of bit positions at which two equal-length
codes differ. Every bit is compared; the exact ratio is reported to the
user, so there is no early exit once the threshold is crossed.
"""

import numpy as np
import structlog
from scipy.spatial import distance

from .alignment import align_codes
from .data_models import IrisCode
from .exceptions import CodeAlignmentError

logger = structlog.get_logger(__name__)


def _check_aligned(first: IrisCode, second: IrisCode) -> None:
    if len(first) != len(second):
        raise CodeAlignmentError(
            "Codes must be aligned before computing a Hamming distance",
            first_length=len(first),
            second_length=len(second),
        )


def count_mismatches(first: IrisCode, second: IrisCode) -> int:
    """
    Count the bit positions at which two aligned codes differ.

    Raises
    ------
    CodeAlignmentError
        If the codes have different lengths.
    """
    _check_aligned(first, second)
    return int(np.count_nonzero(first.to_array() != second.to_array()))


def hamming_distance(first: IrisCode, second: IrisCode) -> float:
    """
    Compute the normalized Hamming distance between two aligned codes.

    Parameters
    ----------
    first : IrisCode
        First code.
    second : IrisCode
        Second code, with the same length as ``first``.

    Returns
    -------
    float
        ``mismatches / length``, in [0.0, 1.0].

    Raises
    ------
    CodeAlignmentError
        If the codes have different lengths.

    Examples
    --------
    >>> hamming_distance(IrisCode("1100"), IrisCode("1010"))
    0.5
    """
    _check_aligned(first, second)
    return float(distance.hamming(first.to_array(), second.to_array()))


def compare_codes(first: IrisCode, second: IrisCode) -> float:
    """Align two codes of any length and return their Hamming distance."""
    aligned_first, aligned_second = align_codes(first, second)
    result = hamming_distance(aligned_first, aligned_second)

    logger.debug(
        "Compared codes",
        length=len(aligned_first),
        distance=result,
    )

    return result

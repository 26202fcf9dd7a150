"""
Iris code alignment.

Decoded codes carry no leading zero bits, so an enrolled code and a presented
code usually differ in length. Alignment left-pads the shorter code with zero
bits; this keeps the integer value of both codes intact and never truncates.
"""

from typing import Tuple

import structlog

from .constants import ZERO_BIT
from .data_models import IrisCode
from .exceptions import CodeAlignmentError

logger = structlog.get_logger(__name__)


def pad_code(code: IrisCode, width: int) -> IrisCode:
    """
    Left-pad a code with zero bits up to the given width.

    Parameters
    ----------
    code : IrisCode
        Code to pad.
    width : int
        Target number of bits.

    Returns
    -------
    IrisCode
        The padded code, or ``code`` itself if it already has ``width`` bits.

    Raises
    ------
    CodeAlignmentError
        If the code is wider than ``width``.
    """
    if len(code) > width:
        raise CodeAlignmentError(
            f"Cannot pad a {len(code)}-bit code to {width} bits",
            first_length=len(code),
            second_length=width,
        )

    if len(code) == width:
        return code

    return IrisCode(ZERO_BIT * (width - len(code)) + code.bits)


def align_codes(first: IrisCode, second: IrisCode) -> Tuple[IrisCode, IrisCode]:
    """
    Bring two codes to the same length.

    The shorter code is left-padded with ``|len(first) - len(second)|`` zero
    bits and the longer one is returned unchanged. Codes of equal length are
    both returned unchanged, so aligning an aligned pair is a no-op.

    Parameters
    ----------
    first : IrisCode
        First code.
    second : IrisCode
        Second code.

    Returns
    -------
    Tuple[IrisCode, IrisCode]
        The two codes, in the same order, with equal lengths.

    Examples
    --------
    >>> a, b = align_codes(IrisCode("11111111"), IrisCode("0"))
    >>> b.bits
    '00000000'
    """
    width = max(len(first), len(second))

    if len(first) != len(second):
        logger.debug(
            "Aligning codes",
            first_length=len(first),
            second_length=len(second),
            width=width,
        )

    return pad_code(first, width), pad_code(second, width)

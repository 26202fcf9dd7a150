"""
Hex iris code decoding.

Raw iris codes are entered as base-16 strings. They are decoded to the
canonical minimal-width binary form: no fixed-width padding is applied here,
so codes of different lengths are expected and reconciled by alignment.
"""

import structlog

from .constants import CODE_RADIX, HEX_DIGITS, MAX_CODE_BITS, MAX_CODE_VALUE
from .data_models import IrisCode
from .exceptions import CodeDecodeError

logger = structlog.get_logger(__name__)

_HEX_DIGIT_SET = frozenset(HEX_DIGITS)


def decode_hex(raw: str) -> IrisCode:
    """
    Decode a hex string into an iris code.

    Only the characters ``[0-9a-fA-F]`` are accepted; signs, ``0x``
    prefixes, underscores and whitespace are all rejected.

    Parameters
    ----------
    raw : str
        Hex representation of a non-negative integer.

    Returns
    -------
    IrisCode
        Minimal binary representation of the value. Zero decodes to ``"0"``.

    Raises
    ------
    CodeDecodeError
        If the string is empty, contains a non-hex character, or denotes a
        value that needs more than 63 bits.

    Examples
    --------
    >>> decode_hex("F0").bits
    '11110000'
    >>> decode_hex("0").bits
    '0'
    """
    if not isinstance(raw, str) or not raw:
        raise CodeDecodeError("Iris code is empty", raw_code=str(raw), reason="empty")

    invalid = sorted(set(raw) - _HEX_DIGIT_SET)
    if invalid:
        logger.debug("Rejected non-hex iris code", raw_code=raw, invalid=invalid)
        raise CodeDecodeError(
            f"Iris code contains non-hex characters: {''.join(invalid)}",
            raw_code=raw,
            reason="non_hex",
        )

    value = int(raw, CODE_RADIX)
    if value > MAX_CODE_VALUE:
        logger.debug(
            "Rejected oversized iris code",
            raw_code=raw,
            bit_length=value.bit_length(),
            max_bits=MAX_CODE_BITS,
        )
        raise CodeDecodeError(
            f"Iris code needs {value.bit_length()} bits, more than {MAX_CODE_BITS}",
            raw_code=raw,
            reason="overflow",
        )

    return IrisCode(format(value, "b"))

"""
Constants for the iris matcher.

This module centralizes the fixed parameters of the matching engine. They are
deliberately not read from the environment: the acceptance threshold and the
code width are part of the recognition contract.
"""

from typing import Final

# =============================================================================
# Decision Policy
# =============================================================================

# Normalized Hamming distance below which a presented code is accepted.
# A distance equal to the threshold is rejected.
MATCH_THRESHOLD: Final[float] = 0.32

# =============================================================================
# Code Decoding
# =============================================================================

# Maximum number of significant bits in a decoded iris code (signed 64-bit
# integer with the sign bit reserved)
MAX_CODE_BITS: Final[int] = 63

# Largest value a hex iris code may denote
MAX_CODE_VALUE: Final[int] = (1 << MAX_CODE_BITS) - 1

# Base used to interpret raw iris codes
CODE_RADIX: Final[int] = 16

# Characters allowed in a raw iris code
HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"

# Bit characters of a decoded iris code
ZERO_BIT: Final[str] = "0"
ONE_BIT: Final[str] = "1"

# =============================================================================
# Display
# =============================================================================

# Decimal places used when reporting a Hamming distance
DISTANCE_DISPLAY_PRECISION: Final[int] = 2

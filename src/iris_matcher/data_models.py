"""
Data models for the iris matcher.

This module defines the core data structures passed between the decoder, the
identity store, the matcher and the interactive driver. All models are
dataclasses validated in ``__post_init__`` and serializable with ``to_dict``
for structured logging.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

import numpy as np

from .constants import MATCH_THRESHOLD, ONE_BIT, ZERO_BIT


@dataclass(frozen=True)
class IrisCode:
    """
    An ordered sequence of bits representing an iris feature code.

    The bits are stored as a string of ``'0'`` and ``'1'`` characters, most
    significant bit first, exactly as the decoder produced them. No width is
    implied: two codes of different lengths are reconciled by alignment.

    Parameters
    ----------
    bits : str
        Non-empty string of binary digits.

    Examples
    --------
    >>> code = IrisCode("11110000")
    >>> len(code)
    8
    >>> code.value
    240
    """

    bits: str

    def __post_init__(self) -> None:
        """
        Validate the bit string.

        Raises
        ------
        ValueError
            If the bit string is empty or contains characters other than 0/1.
        """
        if not isinstance(self.bits, str) or not self.bits:
            raise ValueError("bits must be a non-empty string")

        if self.bits.strip(ZERO_BIT + ONE_BIT):
            raise ValueError(f"bits must contain only 0 and 1, got {self.bits!r}")

    def __len__(self) -> int:
        return len(self.bits)

    def __str__(self) -> str:
        return self.bits

    @property
    def value(self) -> int:
        """Integer value of the code."""
        return int(self.bits, 2)

    def to_array(self) -> np.ndarray:
        """
        Convert the code to a numpy array of 0/1 values.

        Returns
        -------
        np.ndarray
            One ``uint8`` element per bit, most significant bit first.
        """
        return np.frombuffer(self.bits.encode("ascii"), dtype=np.uint8) - ord(ZERO_BIT)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the code to a dictionary for serialization."""
        return {"bits": self.bits, "length": len(self.bits)}


@dataclass(frozen=True)
class IdentityRecord:
    """
    An enrolled identity.

    Records are created on enrollment and never modified; re-enrolling a name
    replaces the record as a whole.

    Parameters
    ----------
    name : str
        Unique identity name.
    code : IrisCode
        The enrolled iris code.
    enrolled_at : datetime, default_factory=datetime.now
        Timestamp of the enrollment.
    """

    name: str
    code: IrisCode
    enrolled_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not isinstance(self.code, IrisCode):
            raise ValueError("code must be an IrisCode")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary for serialization."""
        return {
            "name": self.name,
            "code": self.code.to_dict(),
            "enrolled_at": self.enrolled_at.isoformat(),
        }


@dataclass
class EnrollResult:
    """
    Outcome of an enrollment.

    Parameters
    ----------
    name : str
        The enrolled name.
    code : IrisCode
        The decoded code that was stored.
    replaced : bool, default=False
        Whether an earlier enrollment under the same name was overwritten.
    """

    name: str
    code: IrisCode
    replaced: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary for serialization."""
        return {
            "name": self.name,
            "code": self.code.bits,
            "replaced": self.replaced,
        }


@dataclass
class RecognizeResult:
    """
    Outcome of a recognition attempt.

    Parameters
    ----------
    name : str
        The claimed identity.
    distance : float
        Normalized Hamming distance between presented and enrolled codes.
    granted : bool
        Whether access is granted.
    threshold : float, default=MATCH_THRESHOLD
        Threshold the decision was taken against.
    """

    name: str
    distance: float
    granted: bool
    threshold: float = MATCH_THRESHOLD

    def __post_init__(self) -> None:
        """
        Validate the result.

        Raises
        ------
        ValueError
            If the distance is outside [0, 1].
        """
        if not 0.0 <= self.distance <= 1.0:
            raise ValueError("distance must be between 0.0 and 1.0")

    @property
    def decision(self) -> str:
        """``"granted"`` or ``"denied"``."""
        return "granted" if self.granted else "denied"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary for serialization."""
        return {
            "name": self.name,
            "distance": self.distance,
            "granted": self.granted,
            "decision": self.decision,
            "threshold": self.threshold,
        }

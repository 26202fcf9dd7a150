"""
Enrollment and recognition for the iris matcher.

This module ties the decoder, the identity store and the Hamming distance
together. Recognition decodes the presented code, looks up the enrolled one,
aligns both and accepts the claim when the normalized distance is strictly
below the match threshold.
"""

import structlog

from .constants import MATCH_THRESHOLD
from .data_models import EnrollResult, RecognizeResult
from .decoder import decode_hex
from .hamming import compare_codes
from .identity_store import IdentityStore
from .utils import timer

logger = structlog.get_logger(__name__)


def is_match(distance: float, threshold: float = MATCH_THRESHOLD) -> bool:
    """
    Apply the acceptance rule to a Hamming distance.

    A distance equal to the threshold is rejected.

    Examples
    --------
    >>> is_match(0.3199)
    True
    >>> is_match(0.32)
    False
    """
    return distance < threshold


class IrisMatcher:
    """
    Enrollment and recognition engine.

    The matcher owns no state besides the store it is given. Each call is
    independent: there are no retries, attempt counters or lockouts. A call
    that fails (bad code, unknown name) leaves the store unchanged.

    Parameters
    ----------
    store : IdentityStore
        Registry of enrolled identities.
    threshold : float, default=MATCH_THRESHOLD
        Distance below which a claim is accepted.

    Examples
    --------
    >>> matcher = IrisMatcher(IdentityStore())
    >>> matcher.enroll("Alice", "F0").code.bits
    '11110000'
    >>> matcher.recognize("Alice", "F0").granted
    True
    """

    def __init__(
        self, store: IdentityStore, threshold: float = MATCH_THRESHOLD
    ) -> None:
        self.store = store
        self.threshold = threshold

        logger.debug("IrisMatcher initialized", threshold=threshold)

    def is_empty(self) -> bool:
        """Return True if no identity has been enrolled."""
        return self.store.is_empty()

    def is_known(self, name: str) -> bool:
        """Return True if ``name`` has been enrolled."""
        return self.store.is_known(name)

    def enroll(self, name: str, raw_code: str) -> EnrollResult:
        """
        Decode ``raw_code`` and enroll it under ``name``.

        Raises
        ------
        CodeDecodeError
            If ``raw_code`` is not a valid hex code.
        InvalidIdentityError
            If ``name`` is blank.
        """
        code = decode_hex(raw_code)
        replaced = self.store.enroll(name, code)
        return EnrollResult(name=name, code=code, replaced=replaced)

    @timer
    def recognize(self, name: str, raw_code: str) -> RecognizeResult:
        """
        Compare a presented code against the code enrolled for ``name``.

        Parameters
        ----------
        name : str
            Claimed identity.
        raw_code : str
            Presented iris code in hex.

        Returns
        -------
        RecognizeResult
            Distance and decision.

        Raises
        ------
        CodeDecodeError
            If ``raw_code`` is not a valid hex code.
        IdentityNotFoundError
            If ``name`` was never enrolled.
        """
        presented = decode_hex(raw_code)
        enrolled = self.store.lookup(name)

        distance = compare_codes(presented, enrolled)
        granted = is_match(distance, self.threshold)

        logger.info(
            "Recognition decision",
            name=name,
            distance=distance,
            granted=granted,
            threshold=self.threshold,
        )

        return RecognizeResult(
            name=name, distance=distance, granted=granted, threshold=self.threshold
        )

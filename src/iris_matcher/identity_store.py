"""
In-memory identity store for the iris matcher.

The store maps identity names to their enrolled iris codes for the lifetime
of the object that owns it. There is no persistence and no deletion; the
caller constructs a store and passes it to the matcher explicitly.
"""

from typing import Dict, List

import structlog

from .data_models import IdentityRecord, IrisCode
from .exceptions import IdentityNotFoundError, InvalidIdentityError

logger = structlog.get_logger(__name__)


class IdentityStore:
    """
    Name to iris code registry.

    Enrolling a name that is already present replaces its record (last
    write wins). The store is not synchronized; concurrent callers must
    serialize access to ``enroll`` and ``lookup`` themselves.

    Examples
    --------
    >>> store = IdentityStore()
    >>> store.enroll("Alice", IrisCode("11110000"))
    >>> store.lookup("Alice").bits
    '11110000'
    """

    def __init__(self) -> None:
        self._records: Dict[str, IdentityRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def enroll(self, name: str, code: IrisCode) -> bool:
        """
        Store ``code`` under ``name``, replacing any earlier enrollment.

        Parameters
        ----------
        name : str
            Identity name. Must not be blank.
        code : IrisCode
            Decoded iris code.

        Returns
        -------
        bool
            True if an existing enrollment was replaced.

        Raises
        ------
        InvalidIdentityError
            If the name is empty or only whitespace.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidIdentityError(str(name))

        replaced = name in self._records
        if replaced:
            logger.info("Overwriting existing enrollment", name=name)

        self._records[name] = IdentityRecord(name=name, code=code)
        logger.info("Identity enrolled", name=name, code_length=len(code))
        return replaced

    def is_known(self, name: str) -> bool:
        """Return True if ``name`` has been enrolled."""
        return name in self._records

    def get_record(self, name: str) -> IdentityRecord:
        """
        Return the full record enrolled under ``name``.

        Raises
        ------
        IdentityNotFoundError
            If the name was never enrolled.
        """
        try:
            return self._records[name]
        except KeyError:
            raise IdentityNotFoundError(name) from None

    def lookup(self, name: str) -> IrisCode:
        """
        Return the code enrolled under ``name``.

        Raises
        ------
        IdentityNotFoundError
            If the name was never enrolled.
        """
        return self.get_record(name).code

    def is_empty(self) -> bool:
        """Return True if nothing has been enrolled yet."""
        return not self._records

    def names(self) -> List[str]:
        """Sorted list of enrolled names."""
        return sorted(self._records)

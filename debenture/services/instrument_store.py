"""Instrument state stores.

A store maps each FieldKey to a value. Reading a field that was never written
returns that field's default (zero, 32 zero bytes, or the annual frequency
code); it never raises. Stores do no domain validation.
"""

import logging
from typing import Any, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from debenture.lib.config import CONTRACT_ID_MAX_LENGTH
from debenture.lib.db import db_session
from debenture.lib.errors import DatabaseError, ValidationError
from debenture.models.contract_data import ContractData
from debenture.models.field_key import FieldKey

logger = logging.getLogger(__name__)


class InstrumentStore(Protocol):
    """Key-value storage for a single debenture's fields."""

    def get(self, field_key: FieldKey) -> Any:
        """Return the stored value, or the field's default when missing."""
        ...

    def set(self, field_key: FieldKey, value: Any) -> None:
        """Store a value under field_key, replacing any previous value."""
        ...


class InMemoryInstrumentStore:
    """Dict-backed store. Useful for tests and for embedding without a database."""

    def __init__(self) -> None:
        self._fields: dict[FieldKey, Any] = {}

    def get(self, field_key: FieldKey) -> Any:
        return self._fields.get(FieldKey(field_key), FieldKey(field_key).default)

    def set(self, field_key: FieldKey, value: Any) -> None:
        self._fields[FieldKey(field_key)] = value

    def __contains__(self, field_key: object) -> bool:
        return field_key in self._fields


class SqlInstrumentStore:
    """Store backed by the contract_data table, scoped to one contract id.

    When constructed with a session, every read and write goes through it and
    the caller owns the transaction, so a multi-field write such as ``issue``
    commits or rolls back as a unit. Without a session, each call runs in its
    own ``db_session()``.
    """

    def __init__(self, contract_id: str, session: Optional[Session] = None):
        """
        Initialize store.

        Args:
            contract_id: Contract instance the fields belong to
            session: Optional caller-managed SQLAlchemy session

        Raises:
            ValidationError: If contract_id is empty or too long
        """
        contract_id = contract_id.strip()
        if not contract_id or len(contract_id) > CONTRACT_ID_MAX_LENGTH:
            raise ValidationError(
                f"Contract id must be 1-{CONTRACT_ID_MAX_LENGTH} characters, got {contract_id!r}"
            )
        self.contract_id = contract_id
        self._session = session

    def get(self, field_key: FieldKey) -> Any:
        field_key = FieldKey(field_key)
        try:
            if self._session is not None:
                row = self._session.get(ContractData, (self.contract_id, int(field_key)))
                raw = row.value if row is not None else None
            else:
                with db_session() as session:
                    row = session.get(ContractData, (self.contract_id, int(field_key)))
                    raw = row.value if row is not None else None
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to read {field_key.name} for {self.contract_id}: {e}")

        if raw is None:
            return field_key.default
        return field_key.decode(raw)

    def set(self, field_key: FieldKey, value: Any) -> None:
        field_key = FieldKey(field_key)
        record = ContractData(
            contract_id=self.contract_id,
            field_key=int(field_key),
            value=field_key.encode(value),
        )
        try:
            if self._session is not None:
                self._session.merge(record)
                self._session.flush()
            else:
                with db_session() as session:
                    session.merge(record)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to write {field_key.name} for {self.contract_id}: {e}")

        logger.debug("Stored %s for contract %s", field_key.name, self.contract_id)

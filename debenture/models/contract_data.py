"""
ContractData model - persisted fields of a debenture contract.

One row per (contract, field). Values are kept as text so that
arbitrary-precision integers survive SQLite's 64-bit INTEGER limit.
"""

from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from debenture.lib.config import CONTRACT_ID_MAX_LENGTH
from debenture.lib.db import Base


class ContractData(Base):  # type: ignore[misc,valid-type]
    """
    A single stored field of a debenture contract.

    Attributes:
        contract_id: Contract instance the field belongs to
        field_key: FieldKey code (0-4)
        value: Encoded field value (decimal text for integers, hex for the holder)
        updated_at: When the field was last written
    """

    __tablename__ = "contract_data"

    contract_id: Mapped[str] = mapped_column(
        String(CONTRACT_ID_MAX_LENGTH),
        primary_key=True,
    )

    field_key: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
    )

    value: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (CheckConstraint("field_key BETWEEN 0 AND 4", name="ck_field_key_range"),)

    def __repr__(self) -> str:
        """Return string representation of the stored field."""
        return (
            f"<ContractData(contract_id={self.contract_id!r}, "
            f"field_key={self.field_key}, value={self.value!r})>"
        )

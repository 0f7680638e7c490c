"""
Models for the debenture application.

ContractData inherits from the Base declarative class defined in debenture.lib.db.
"""

from debenture.models.contract_data import ContractData
from debenture.models.field_key import FieldKey
from debenture.models.frequency import CouponPaymentFrequency

__all__ = [
    # Persistence
    "ContractData",
    # Enums
    "FieldKey",
    "CouponPaymentFrequency",
]

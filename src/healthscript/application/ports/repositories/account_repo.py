"""
Account repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ....domain.entities.account import Account


class AccountRepository(ABC):
    """Abstract repository for login accounts."""

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account, assigning an id on first insert."""
        pass

    @abstractmethod
    async def find_by_id(self, account_id: int) -> Optional[Account]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find a doctor or medical store account by email (case-insensitive)."""
        pass

    @abstractmethod
    async def find_by_uhid(self, uhid: str) -> Optional[Account]:
        """Find a patient account by UHID."""
        pass

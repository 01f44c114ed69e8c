"""
MongoDB implementation of AccountRepository.
"""

import re
from typing import Optional

from pymongo.errors import DuplicateKeyError

from healthscript.application.ports.repositories.account_repo import AccountRepository
from healthscript.core.utils.datetime_utils import ensure_utc
from healthscript.domain.entities.account import Account
from healthscript.domain.enums import UserRole
from healthscript.domain.errors import AccountAlreadyExistsError

from ..models.account_m import AccountMongo
from ..sequences import next_sequence


class MongoAccountRepository(AccountRepository):
    """MongoDB implementation of AccountRepository."""

    async def save(self, account: Account) -> Account:
        if account.id is None:
            account.id = await next_sequence(AccountMongo.Settings.name)
        account_mongo = self._domain_to_mongo(account)
        try:
            await account_mongo.save()
        except DuplicateKeyError:
            # Lost a race with a concurrent sign-up for the same identifier
            raise AccountAlreadyExistsError(
                "Account already exists", account.login_identifier
            )
        return self._mongo_to_domain(account_mongo)

    async def find_by_id(self, account_id: int) -> Optional[Account]:
        account_mongo = await AccountMongo.get(account_id)
        if not account_mongo:
            return None
        return self._mongo_to_domain(account_mongo)

    async def find_by_email(self, email: str) -> Optional[Account]:
        if not email:
            return None
        pattern = f"^{re.escape(email.strip())}$"
        account_mongo = await AccountMongo.find_one(
            {"email": {"$regex": pattern, "$options": "i"}}
        )
        if not account_mongo:
            return None
        return self._mongo_to_domain(account_mongo)

    async def find_by_uhid(self, uhid: str) -> Optional[Account]:
        account_mongo = await AccountMongo.find_one(
            AccountMongo.uhid == uhid, AccountMongo.role == UserRole.PATIENT.value
        )
        if not account_mongo:
            return None
        return self._mongo_to_domain(account_mongo)

    def _domain_to_mongo(self, account: Account) -> AccountMongo:
        return AccountMongo(
            id=account.id,
            role=account.role.value,
            name=account.name,
            password_hash=account.password_hash,
            email=account.email,
            uhid=account.uhid,
            doctor_id=account.doctor_id,
            department=account.department,
            designation=account.designation,
            photo=account.photo,
            phone=account.phone,
            license_number=account.license_number,
            address=account.address,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def _mongo_to_domain(self, account_mongo: AccountMongo) -> Account:
        return Account(
            id=account_mongo.id,
            role=UserRole(account_mongo.role),
            name=account_mongo.name,
            password_hash=account_mongo.password_hash,
            email=account_mongo.email,
            uhid=account_mongo.uhid,
            doctor_id=account_mongo.doctor_id,
            department=account_mongo.department,
            designation=account_mongo.designation,
            photo=account_mongo.photo,
            phone=account_mongo.phone,
            license_number=account_mongo.license_number,
            address=account_mongo.address,
            created_at=ensure_utc(account_mongo.created_at),
            updated_at=ensure_utc(account_mongo.updated_at),
        )

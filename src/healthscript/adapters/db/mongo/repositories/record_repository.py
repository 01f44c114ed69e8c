"""
MongoDB implementation of RecordRepository.
"""

from typing import List, Optional

from healthscript.application.ports.repositories.record_repo import RecordRepository
from healthscript.core.utils.datetime_utils import ensure_utc
from healthscript.domain.entities.record import Record
from healthscript.domain.enums import RecordType
from healthscript.domain.value_objects.uhid import Uhid

from ..models.record_m import RecordMongo
from ..sequences import next_sequence


class MongoRecordRepository(RecordRepository):
    """MongoDB implementation of RecordRepository."""

    async def save(self, record: Record) -> Record:
        if record.id is None:
            record.id = await next_sequence(RecordMongo.Settings.name)
        record_mongo = RecordMongo(
            id=record.id,
            uhid=record.uhid.value,
            type=record.type.value,
            title=record.title,
            data=record.data,
            created_at=record.created_at,
        )
        await record_mongo.save()
        return self._mongo_to_domain(record_mongo)

    async def find_by_id(self, record_id: int) -> Optional[Record]:
        record_mongo = await RecordMongo.get(record_id)
        if not record_mongo:
            return None
        return self._mongo_to_domain(record_mongo)

    async def find_by_uhid(self, uhid: str) -> List[Record]:
        """All records for a patient, newest first."""
        docs = (
            await RecordMongo.find(RecordMongo.uhid == uhid)
            .sort("-created_at", "-_id")
            .to_list()
        )
        return [self._mongo_to_domain(doc) for doc in docs]

    async def delete(self, record_id: int) -> bool:
        record_mongo = await RecordMongo.get(record_id)
        if not record_mongo:
            return False
        await record_mongo.delete()
        return True

    def _mongo_to_domain(self, record_mongo: RecordMongo) -> Record:
        return Record(
            id=record_mongo.id,
            uhid=Uhid(record_mongo.uhid),
            type=RecordType(record_mongo.type),
            title=record_mongo.title,
            data=record_mongo.data,
            created_at=ensure_utc(record_mongo.created_at),
        )

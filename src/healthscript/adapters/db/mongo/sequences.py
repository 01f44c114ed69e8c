"""Auto-increment integer ids backed by the ``counters`` collection."""

from pymongo import ReturnDocument

from .models.counter_m import CounterMongo


async def next_sequence(name: str) -> int:
    """Atomically issue the next id for a collection, starting at 1."""
    collection = CounterMongo.get_motor_collection()
    doc = await collection.find_one_and_update(
        {"_id": name},
        {"$inc": {"value": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(doc["value"])

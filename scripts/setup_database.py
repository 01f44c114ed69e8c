#!/usr/bin/env python3
"""
Database setup script for HealthScript.

This script performs:
1. Index creation for every collection (via Beanie)
2. Counter seeding so integer ids continue after existing documents
3. Database health checks

Usage:
    python scripts/setup_database.py --full-setup
    python scripts/setup_database.py --indexes-only
    python scripts/setup_database.py --health-check
"""

import argparse
import asyncio
import sys
from typing import Any, Dict

# Add the src directory to the Python path
sys.path.insert(0, 'src')

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from healthscript.adapters.db.mongo.models import DOCUMENT_MODELS
from healthscript.core.config import get_settings

# Collections whose documents carry integer ids issued from ``counters``
SEQUENCED_COLLECTIONS = ["accounts", "patients", "prescriptions", "records"]


class DatabaseSetup:
    """Index creation, counter seeding and health checks."""

    def __init__(self):
        self.settings = get_settings()
        self.client = AsyncIOMotorClient(self.settings.database.uri)
        self.db = self.client[self.settings.database.db_name]

    async def health_check(self) -> Dict[str, Any]:
        print("🏥 Performing database health check...")
        collections = await self.db.list_collection_names()
        status: Dict[str, Any] = {"collections": collections}
        for name in SEQUENCED_COLLECTIONS:
            count = await self.db[name].count_documents({})
            indexes = await self.db[name].list_indexes().to_list(None)
            counter = await self.db.counters.find_one({"_id": name})
            status[name] = {
                "total": count,
                "indexes": len(indexes),
                "last_id": counter["value"] if counter else 0,
            }
            print(f"   {name}: {count} documents, {len(indexes)} indexes, last id {status[name]['last_id']}")
        return status

    async def create_indexes(self) -> bool:
        print("⚡ Creating indexes...")
        try:
            await init_beanie(database=self.db, document_models=DOCUMENT_MODELS)
        except Exception as e:
            print(f"❌ Index creation failed: {e}")
            return False
        print("✅ Indexes created")
        return True

    async def seed_counters(self) -> None:
        """Raise each counter to at least the highest id already stored."""
        print("🔢 Seeding id counters...")
        for name in SEQUENCED_COLLECTIONS:
            latest = await self.db[name].find_one({}, sort=[("_id", -1)], projection={"_id": 1})
            if not latest or not isinstance(latest["_id"], int):
                continue
            await self.db.counters.update_one(
                {"_id": name}, {"$max": {"value": latest["_id"]}}, upsert=True
            )
            print(f"   {name}: counter >= {latest['_id']}")

    async def close(self):
        self.client.close()


async def main():
    parser = argparse.ArgumentParser(description="HealthScript database setup")
    parser.add_argument("--full-setup", action="store_true", help="Create indexes and seed counters")
    parser.add_argument("--indexes-only", action="store_true", help="Only create indexes")
    parser.add_argument("--health-check", action="store_true", help="Only report database status")
    args = parser.parse_args()

    if not any([args.full_setup, args.indexes_only, args.health_check]):
        parser.print_help()
        return 1

    setup = DatabaseSetup()
    try:
        if args.health_check:
            await setup.health_check()
            return 0
        if not await setup.create_indexes():
            return 1
        if args.full_setup:
            await setup.seed_counters()
        await setup.health_check()
        return 0
    finally:
        await setup.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

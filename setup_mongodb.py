"""
MongoDB Setup Script
Checks the connection and creates the brain dump collections' indexes.
"""
import asyncio
from liferpg.repositories import db_manager
from liferpg.config import settings

COLLECTIONS = ("brain_dumps", "processing_records")


async def setup_mongodb():
    print("🔄 Connecting to MongoDB...")
    print(f"   Database: {settings.mongodb_database}")
    print()

    try:
        await db_manager.connect()
        db = db_manager.database

        existing_collections = await db.list_collection_names()
        print(f"📦 Existing collections: {existing_collections or 'None'}")
        print()

        print("🔨 Creating indexes...")
        await db_manager.create_indexes()
        print("✅ Indexes created")
        print()

        total = 0
        for name in COLLECTIONS:
            indexes = await db[name].index_information()
            total += len(indexes)
            print(f"   {name}: {len(indexes)} indexes")
            for idx_name in indexes:
                print(f"      - {idx_name}")

        print()
        print(f"🎉 Setup complete: {len(COLLECTIONS)} collections, {total} indexes")

    except Exception as e:
        print(f"❌ Error: {e}")
        print("💡 Check MONGODB_URI and that the server is reachable.")
        raise

    finally:
        await db_manager.disconnect()
        print("👋 Disconnected from MongoDB")


if __name__ == "__main__":
    asyncio.run(setup_mongodb())

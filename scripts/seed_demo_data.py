"""
Seed script to populate the database with the demo catalog.

Usage:
    python scripts/seed_demo_data.py [--reset]

Creates:
    - 5 channels (one admin, login admin / admin)
    - 7 videos, two of them shorts
    - A few comments

Environment Variables:
    DATABASE_URL - Database connection string
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from videoshare.config import settings
from videoshare.database import AsyncSessionLocal, close_db, drop_db, init_db
from videoshare.core.seed import DEMO_USERS, seed_demo_data


async def seed(reset: bool):
    """Create tables and load demo data."""
    if reset:
        print("🧹 Dropping existing tables...")
        await drop_db()

    await init_db()

    async with AsyncSessionLocal() as session:
        print("🌱 Seeding demo data...")
        if not await seed_demo_data(session):
            print("⚠️  Database already contains data. Skipping seed.")
            print("💡 To reseed, run again with --reset.")
            await close_db()
            return

    print("\n" + "="*60)
    print("✅ DEMO ACCOUNTS")
    print("="*60)
    for user in DEMO_USERS:
        role = "admin" if user.get("is_admin") else "channel"
        print(f"   {user['username']} / {user['password']} ({role})")

    print("\n1️⃣  Login as Admin:")
    print("""
curl -X POST http://localhost:8000/v1/auth/login \\
  -H "Content-Type: application/json" \\
  -d '{"username": "admin", "password": "admin"}'
""")

    print("💡 TIP: Visit http://localhost:8000/docs for interactive API documentation")
    print("="*60)

    await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load the VideoShare demo catalog")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    args = parser.parse_args()

    print("🚀 Starting seed script...")
    print(f"📊 Database: {settings.database_url}")
    print("")

    try:
        asyncio.run(seed(args.reset))
    except KeyboardInterrupt:
        print("\n\n⚠️  Seed interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\n❌ Error seeding data: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

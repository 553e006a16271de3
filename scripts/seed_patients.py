# scripts/seed_patients.py
#  to run the script, run the following command:
#  python scripts/seed_patients.py

"""
Patient Seed Script
Upserts the three demo patients with slug ids (john-smith, maria-garcia, robert-johnson)
"""
import asyncio
import logging
import logging.config
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database.connection import Database
from app.system_services.create_patient import seed_patients
from config.appconfig import AppSettings, settings

logger = logging.getLogger("scripts.seed_patients")


async def run_seed(app_settings: AppSettings = settings) -> int:
    """Create tables if needed and upsert the seed patients."""
    database = Database(app_settings.DATABASE_URL, echo=app_settings.DATABASE_ECHO)
    try:
        await database.create_tables()
        async with database.session_factory() as session:
            patients = await seed_patients(session)
    finally:
        await database.dispose()

    logger.info(f"✓ Seed completed: {len(patients)} patients created")
    return len(patients)


if __name__ == "__main__":
    logging.config.dictConfig(settings.LOGGING_CONFIG)
    try:
        asyncio.run(run_seed())
    except Exception as e:
        logger.error(f"❌ Seed failed: {e}")
        sys.exit(1)

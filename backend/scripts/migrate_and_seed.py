import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DATABASE_URL = os.environ.get("DATABASE_URL", "")
if not DATABASE_URL:
    print("WARNING: DATABASE_URL not set, skipping migration and seed")
    sys.exit(0)

if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

os.environ["DATABASE_URL"] = DATABASE_URL

from app.database import engine, create_tables
from app.models.db_models import PublicHoliday
from sqlalchemy.orm import sessionmaker

print("Creating tables...")
create_tables()
print("Tables created.")

# Only seed an empty table so hand-maintained calendars survive redeploys.
Session = sessionmaker(bind=engine)
session = Session()
try:
    holiday_count = session.query(PublicHoliday).count()
    if holiday_count > 0:
        print(f"Database already contains {holiday_count} public holidays — skipping seed.")
        sys.exit(0)

    from scripts.seed_holidays import seed_public_holidays, source_rows

    seed_public_holidays(session, source_rows())
    print("All done. Database seeded successfully.")
except Exception as e:
    session.rollback()
    print(f"Seed error: {e}")
    raise
finally:
    session.close()

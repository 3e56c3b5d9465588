"""
Seed the public_holidays table.
Reads data/source/public-holidays.csv (columns: jurisdiction, date, name)
when present, otherwise loads the bundled NSW calendar.
Run from the project root:
  python backend/scripts/seed_holidays.py
"""

import os
import sys
import csv
from datetime import datetime

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))
load_dotenv()

from app.config import settings
from app.database import engine, create_tables
from app.models.db_models import PublicHoliday
from app.services.holidays import DEFAULT_JURISDICTION, NSW_PUBLIC_HOLIDAYS
from sqlalchemy.orm import sessionmaker

Session = sessionmaker(bind=engine)

CSV_NAME = 'public-holidays.csv'


def parse_date(val):
    if not val or val.strip() == '':
        return None
    for fmt in ('%Y-%m-%d', '%d/%m/%Y'):
        try:
            return datetime.strptime(val.strip(), fmt).date()
        except ValueError:
            continue
    return None


def read_holiday_csv(csv_path):
    """Yield (jurisdiction, date, name) rows; rows without a parseable date are skipped."""
    with open(csv_path, newline='', encoding='utf-8-sig') as f:
        reader = csv.DictReader(f)
        for row in reader:
            holiday_date = parse_date(row.get('date', ''))
            jurisdiction = row.get('jurisdiction', '').strip().upper()
            if not holiday_date or not jurisdiction:
                continue
            yield jurisdiction, holiday_date, row.get('name', '').strip() or None


def bundled_rows():
    for iso in sorted(NSW_PUBLIC_HOLIDAYS):
        yield DEFAULT_JURISDICTION, datetime.strptime(iso, '%Y-%m-%d').date(), None


def seed_public_holidays(session, rows):
    """Replace the holidays of every jurisdiction present in rows."""
    rows = list(rows)
    jurisdictions = {r[0] for r in rows}
    print(f"Seeding public holidays for {', '.join(sorted(jurisdictions)) or 'no jurisdictions'}...")
    if jurisdictions:
        session.query(PublicHoliday).filter(
            PublicHoliday.jurisdiction.in_(jurisdictions)
        ).delete(synchronize_session=False)
    seen = set()
    count = 0
    for jurisdiction, holiday_date, name in rows:
        if (jurisdiction, holiday_date) in seen:
            continue
        seen.add((jurisdiction, holiday_date))
        session.add(PublicHoliday(
            jurisdiction=jurisdiction,
            holiday_date=holiday_date,
            name=name,
        ))
        count += 1
    session.commit()
    print(f"  → {count} public holidays seeded")
    return count


def source_rows():
    csv_path = os.path.join(os.path.dirname(__file__), '..', '..', settings.data_dir, 'source', CSV_NAME)
    if os.path.exists(csv_path):
        print(f"Reading {csv_path}")
        return read_holiday_csv(csv_path)
    print("No holiday CSV found, using the bundled NSW calendar")
    return bundled_rows()


if __name__ == '__main__':
    if not engine:
        print("Error: DATABASE_URL not set. Set it in backend/.env or environment.")
        sys.exit(1)

    print("Creating tables if they don't exist...")
    create_tables()

    session = Session()
    try:
        seed_public_holidays(session, source_rows())
        print("\nAll done. Database seeded successfully.")
    except Exception as e:
        session.rollback()
        print(f"\nError: {e}")
        raise
    finally:
        session.close()

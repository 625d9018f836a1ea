# scripts/cleanup_duplicate_schedules.py
# Usage:
#   python Scripts/cleanup_duplicate_schedules.py
#   python Scripts/cleanup_duplicate_schedules.py --dry-run

import argparse

from app.core.logging import configure_logging
from app.crud import crud_schedule
from app.db.session import SessionLocal
from app.services.schedule_cleanup import cleanup_duplicates, duplicate_ids


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--dry-run", action="store_true",
                    help="Only report how many rows would be removed")
    args = ap.parse_args()

    configure_logging()
    db = SessionLocal()
    try:
        if args.dry_run:
            ids = duplicate_ids(crud_schedule.list_schedules(db))
            print(f"DRY RUN. {len(ids)} duplicate schedule(s) would be removed: {ids}")
            return
        deleted = cleanup_duplicates(db)
        print(f"DONE. Removed {deleted} duplicate schedule(s).")
    finally:
        db.close()


if __name__ == "__main__":
    main()

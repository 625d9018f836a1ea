# scripts/make_admin.py
# Usage:
#   python Scripts/make_admin.py someone@example.org
#   python Scripts/make_admin.py someone@example.org --department FAMILY

import argparse

from app.core.errors import DomainError
from app.crud import crud_user
from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.services import users as users_service


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("email", help="Email of an existing user")
    ap.add_argument("--department", help="Also move the user to this department")
    args = ap.parse_args()

    init_db()
    db = SessionLocal()
    try:
        u = crud_user.get_user_by_email(db, args.email)
        if not u:
            raise SystemExit(f"User not found: {args.email}")
        try:
            users_service.set_role(db, u.id, "ADMIN")
            if args.department:
                users_service.set_department(db, u.id, args.department)
        except DomainError as e:
            raise SystemExit(f"ERROR: {e.message}")
        print(f"OK: {u.email} is now ADMIN ({u.department})")
    finally:
        db.close()


if __name__ == "__main__":
    main()

"""
Seed the initial admin and the default service catalog.
Existing rows are left unchanged. Run from the project root with .env loaded.

Usage:
  python scripts/seed_catalog.py
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fieldops.db.init_db import ensure_initial_admin, seed_service_catalog
from fieldops.db.session import SessionLocal


def main():
    db = SessionLocal()
    try:
        admin = ensure_initial_admin(db)
        if admin:
            print(f"Created admin: {admin.username}")
        added = seed_service_catalog(db)
        print(f"Service catalog: {added} entries added")
    finally:
        db.close()


if __name__ == "__main__":
    main()

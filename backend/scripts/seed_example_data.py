"""
Seed Example Data for Craft Library

Creates the tables if needed and inserts the sample statuses, craft types,
material types, stash, projects, sessions and project materials.

Run with: python -m scripts.seed_example_data   (from backend/)
"""
from craftlib.db.seed import seed_example_data
from craftlib.db.session import SessionLocal, init_db
from craftlib.logging_config import setup_logging


def main() -> None:
    setup_logging()
    init_db()

    db = SessionLocal()
    try:
        if seed_example_data(db):
            print("Sample data inserted.")
        else:
            print("Database already has data; nothing inserted.")
    finally:
        db.close()


if __name__ == "__main__":
    main()

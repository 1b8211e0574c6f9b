#!/usr/bin/env python3
"""Seed demo categories and todos.

Uses the database configured through DATABASE_URL (or .env). Categories that
already exist by name are left alone, so running the script twice is safe.

Usage:
    python scripts/seed_demo_data.py
"""

import os
import sys
from datetime import UTC, datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from todo_api.database import SessionLocal, init_db
from todo_api.models import Category, Todo

DEMO_TODOS = {
    "Work": [
        ("Write quarterly report", "Summarize Q3 numbers for the team", 3),
        ("Review pull requests", "Clear the review queue before standup", 1),
        ("Plan sprint", "Groom the backlog and size the top stories", 5),
    ],
    "Home": [
        ("Fix leaky tap", "Kitchen sink, buy a new washer first", 2),
        ("Book dentist", "Six-month check-up", 14),
    ],
    "Errands": [
        ("Pick up dry cleaning", "Ticket is in the car", 1),
        ("Renew library books", "", 7),
    ],
}


def seed_demo_data():
    """Seed the database with representative data."""
    init_db()
    session = SessionLocal()
    now = datetime.now(UTC)

    try:
        for name, todos in DEMO_TODOS.items():
            if session.query(Category).filter_by(name=name).first():
                print(f"Category {name!r} already exists, skipping")
                continue

            print(f"Creating category {name!r}...")
            category = Category(name=name)
            for title, content, due_in_days in todos:
                category.todos.append(
                    Todo(
                        title=title,
                        content=content,
                        created_at=now,
                        due_date=now + timedelta(days=due_in_days),
                        is_completed=False,
                        is_deleted=False,
                    )
                )
            session.add(category)

        session.commit()
        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()

#!/usr/bin/env python
"""
Seed Snowflake with the demo directory, question catalog, score history
and alerts used by the in-memory backend.

Run once after `alembic upgrade head`:
  python scripts/seed_demo_data.py --days 30

Users and questions are idempotent (existing ids are skipped). History
and alerts are only written for an empty surveys / alerts table.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pulse.demo import DEMO_QUESTIONS, DEMO_USERS, generate_history, seed_alerts
from pulse.services.snowflake import get_snowflake_service
from pulse.services.snowflake_stores import (
    SnowflakeAlertStore,
    SnowflakeScoreStore,
    SnowflakeSurveyStore,
)


def seed_users(db) -> int:
    now = datetime.now(timezone.utc)
    inserted = 0
    for u in DEMO_USERS:
        if db.execute_one("SELECT id FROM users WHERE id = %s", (u.id,)):
            print(f"Skip user {u.id}: already exists")
            continue
        db.execute_write(
            """
            INSERT INTO users (id, email, name, department, position,
                manager_id, role, is_active, created_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                u.id, u.email, u.name, u.department, u.position,
                u.manager_id, u.role.value, u.is_active, now
            )
        )
        print(f"Inserted user {u.id}: {u.name} ({u.role.value})")
        inserted += 1
    return inserted


def seed_questions(db) -> int:
    inserted = 0
    for position, q in enumerate(DEMO_QUESTIONS, start=1):
        if db.execute_one("SELECT id FROM questions WHERE id = %s", (q.id,)):
            print(f"Skip question {q.id}: already exists")
            continue
        db.execute_write(
            """
            INSERT INTO questions (id, text, category, weight, position, is_active)
            VALUES (%s, %s, %s, %s, %s, %s)
            """,
            (q.id, q.text, q.category, q.weight, position, q.is_active)
        )
        inserted += 1
    print(f"Inserted {inserted} questions")
    return inserted


def _table_empty(db, table: str) -> bool:
    row = db.execute_one(f"SELECT COUNT(*) AS n FROM {table}")
    return not row or int(row["n"]) == 0


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Seed HR Pulse demo data into Snowflake")
    parser.add_argument("--days", type=int, default=30, help="Days of score history to generate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible history")
    args = parser.parse_args()

    db = get_snowflake_service()
    users = seed_users(db)
    questions = seed_questions(db)

    surveys = 0
    if _table_empty(db, "surveys"):
        surveys = generate_history(
            SnowflakeSurveyStore(db), SnowflakeScoreStore(db),
            days=args.days, seed=args.seed
        )
    else:
        print("Skip history: surveys table is not empty")

    alerts = 0
    if _table_empty(db, "alerts"):
        alerts = seed_alerts(SnowflakeAlertStore(db))
    else:
        print("Skip alerts: alerts table is not empty")

    print(f"\nDone: {users} users, {questions} questions, {surveys} surveys, {alerts} alerts.")


if __name__ == "__main__":
    main()

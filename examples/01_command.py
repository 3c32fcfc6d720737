"""
Example 01: Raw Command Execution

This example demonstrates streaming typed objects from a raw SQL command
using DataFetch's DataFetcher against a SQLite database.
"""

from data_fetch import DataFetcher, setup_logging
from dataclasses import dataclass
from typing import Optional
import tempfile
import sqlite3
from pathlib import Path


@dataclass
class User:
    """Result row for the users table"""
    id: int
    name: str
    email: Optional[str]


class UserSummary:
    """Plain class target: fields come from the parameterless constructor"""

    def __init__(self):
        self.id = 0
        self.name = ""


def main():
    setup_logging()

    # Create a temporary database
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT
        )
    """)
    conn.execute("INSERT INTO users (name, email) VALUES ('Alice', 'alice@example.com')")
    conn.execute("INSERT INTO users (name, email) VALUES ('Bob', NULL)")
    conn.commit()
    conn.close()

    fetcher = DataFetcher.for_driver("sqlite")

    print("=== Raw Command Execution ===\n")

    # Rows are pulled one at a time; the connection closes when the loop ends
    for user in fetcher.command(User, "SELECT * FROM users ORDER BY id", db_path):
        print(f"  - {user.name} ({user.email or 'no email'})")
    print()

    # Extra columns are ignored, matching is by exact column name
    summaries = list(fetcher.command(UserSummary, "SELECT id, name, email FROM users", db_path))
    print(f"Plain class targets: {[s.name for s in summaries]}\n")

    Path(db_path).unlink()


if __name__ == "__main__":
    main()

"""
Example 03: Repository Pattern

This example demonstrates using the Repository pattern for DDD-style code organization.
"""

from data_fetch import DataFetcher
from data_fetch.repository import Repository
from dataclasses import dataclass
from typing import Iterator, Optional
import tempfile
import sqlite3
from pathlib import Path


@dataclass
class User:
    """User entity"""
    id: int
    name: str


class UserRepository(Repository):
    """Repository for User entities"""

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        return next(self.command(User, f"SELECT id, name FROM users WHERE id = {int(user_id)}"), None)

    def find_all(self) -> Iterator[User]:
        """Stream all users"""
        return self.command(User, "SELECT id, name FROM users ORDER BY id")


def main():
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL)")
    conn.execute("INSERT INTO users (name) VALUES ('Alice')")
    conn.execute("INSERT INTO users (name) VALUES ('Bob')")
    conn.commit()
    conn.close()

    user_repo = UserRepository(DataFetcher.for_driver("sqlite"), db_path)

    print("=== Repository Pattern ===\n")

    user = user_repo.find_by_id(1)
    if user:
        print(f"Found: {user.name}\n")

    print("All users:")
    for u in user_repo.find_all():
        print(f"   - {u.name}")

    Path(db_path).unlink()


if __name__ == "__main__":
    main()

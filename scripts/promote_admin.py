"""
Grant the administrator flag to an existing account.

Registration only makes the very first account an administrator; use this
to hand the flag to someone else later:

    python scripts/promote_admin.py <username>
"""
import sys
import os

# Add the parent directory to the path so we can import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.db.base import SessionLocal  # noqa: E402
from app.auth.models import User  # noqa: E402


def promote_admin(username: str) -> bool:
    db = SessionLocal()

    try:
        user = db.query(User).filter(User.username == username).first()

        if not user:
            print(f"ERROR: User '{username}' not found!")
            return False

        if user.is_admin:
            print(f"User '{user.username}' (ID: {user.id}) is already an administrator.")
            return True

        user.is_admin = True
        db.commit()

        print(f"SUCCESS: User '{user.username}' (ID: {user.id}) is now an administrator.")
        return True

    except Exception as e:
        db.rollback()
        print(f"ERROR: Failed to promote user: {str(e)}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/promote_admin.py <username>")
        sys.exit(2)

    if not promote_admin(sys.argv[1]):
        sys.exit(1)

"""Demo accounts loaded into a fresh store."""
from typing import List

from .auth import get_password_hash
from .models import RoleEnum
from .repositories import UserRepository

DEMO_USERS = [
    {"full_name": "Admin User", "email": "admin@gmail.com", "password": "admin123", "phone": "123-456-7890", "role": RoleEnum.ADMIN},
    {"full_name": "Staff Member", "email": "staff@gmail.com", "password": "staff123", "phone": "123-456-7891", "role": RoleEnum.STAFF},
    {"full_name": "Customer User", "email": "customer@gmail.com", "password": "customer123", "phone": "123-456-7892", "role": RoleEnum.CUSTOMER},
]


def seed_demo_users(users: UserRepository) -> List[str]:
    """Create the demo accounts that are missing; returns the emails added."""

    added = []
    for entry in DEMO_USERS:
        if users.get_by_email(entry["email"]):
            continue
        data = {key: value for key, value in entry.items() if key != "password"}
        data["hashed_password"] = get_password_hash(entry["password"])
        users.add(data)
        added.append(entry["email"])
    return added

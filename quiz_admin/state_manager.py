# quiz_admin/state_manager.py
from typing import Iterable
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession
from quiz_admin.models.enums import UserRole
from quiz_admin.models.user import User
from quiz_admin.utils.db import AsyncSessionLocal
from quiz_admin.utils.logger import logger


async def get_user_or_create(session: AsyncSession, user_id: str) -> User:
    """
    Fetches a user from the DB or creates a new one and adds it to the session.
    The calling function is responsible for committing the transaction.
    """
    result = await session.execute(select(User).filter_by(id=user_id))
    user = result.scalars().first()
    if not user:
        logger.info(f"Adding new user '{user_id}' to session.")
        user = User(id=user_id, role=UserRole.USER.value)
        session.add(user)
    return user

async def set_admin_role(user_id: str, is_admin: bool = True):
    """Grants or revokes the admin role for a user, creating the user if needed."""
    async with AsyncSessionLocal() as session:
        user = await get_user_or_create(session, user_id)
        user.role = UserRole.ADMIN.value if is_admin else UserRole.USER.value
        await session.commit()
    logger.info(f"User '{user_id}' role set to '{user.role}'.")

async def seed_admins(user_ids: Iterable[str]) -> int:
    """Grants the admin role to every id given; returns how many were processed."""
    count = 0
    for user_id in user_ids:
        await set_admin_role(user_id, True)
        count += 1
    return count

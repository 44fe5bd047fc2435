import logging
import secrets
from datetime import datetime, timedelta

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from eticket.config.settings import settings
from eticket.database.models.user import User, UserGroup, UserRoles, RefreshToken
from eticket.utils.hash import hash_password

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str):
    q = await db.execute(select(User).options(selectinload(User.group)).where(User.email == email))
    return q.scalars().first()


async def get_users(db: AsyncSession):
    q = await db.execute(select(User).options(selectinload(User.group)).order_by(User.id))
    return q.scalars().all()


async def get_or_create_group(db: AsyncSession, name: str) -> UserGroup:
    q = await db.execute(select(UserGroup).where(UserGroup.name == name))
    group = q.scalars().first()
    if not group:
        group = UserGroup(name=name)
        db.add(group)
        await db.flush()
    return group


async def seed_roles(db: AsyncSession):
    for role in UserRoles:
        await get_or_create_group(db, role.value)
    await db.commit()


async def create_user(db: AsyncSession, full_name: str, email: str, password: str,
                      role: str = UserRoles.USER.value):
    existing = await get_user_by_email(db, email)
    if existing:
        return None
    group = await get_or_create_group(db, role)
    user = User(
        full_name=full_name,
        email=email,
        username=email,
        hashed_password=hash_password(password),
        group=group,
    )
    db.add(user)
    await db.commit()
    logger.info("Registered user id=%s with role %s", user.id, role)
    return user


async def seed_admin(db: AsyncSession):
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return None
    return await create_user(
        db,
        full_name=settings.ADMIN_FULL_NAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        role=UserRoles.ADMIN.value,
    )


async def create_refresh_token(db: AsyncSession, user_id: int):
    token, expires = secrets.token_urlsafe(64), datetime.utcnow() + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    rt = RefreshToken(user_id=user_id, token=token, expires_at=expires)
    db.add(rt)
    await db.commit()
    await db.refresh(rt)
    return rt


async def revoke_refresh_token(db: AsyncSession, token: str):
    await db.execute(delete(RefreshToken).where(RefreshToken.token == token))
    await db.commit()


async def get_refresh_token(db: AsyncSession, token: str):
    q = await db.execute(select(RefreshToken).where(RefreshToken.token == token))
    return q.scalars().first()

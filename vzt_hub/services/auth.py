"""
Registration, login and session handling.

Passwords are stored and compared exactly as entered; this is a local demo
hub, not a security boundary.
"""
from typing import Optional

import structlog

from ..context import SessionContext
from ..errors import (
    DuplicateUser,
    InvalidCredentials,
    InvalidRole,
    MissingCredentials,
    MissingFields,
    NotAuthenticated,
    PermissionDenied,
    UserNotFound,
)
from ..schemas.auth import ROLES, User
from .audit import append_audit
from .store import DomainStore


logger = structlog.get_logger(__name__)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def require_user(ctx: SessionContext) -> User:
    if ctx.current_user is None:
        raise NotAuthenticated()
    return ctx.current_user


def require_roles(ctx: SessionContext, *roles: str) -> User:
    user = require_user(ctx)
    if user.role not in roles:
        raise PermissionDenied()
    return user


def register(
    store: DomainStore,
    ctx: SessionContext,
    name: str,
    email: str,
    password: str,
    role: str,
) -> User:
    """Create a user account. Does not sign the new user in."""
    name, email, password, role = _clean(name), _clean(email), _clean(password), _clean(role)
    if not (name and email and password and role):
        raise MissingFields()
    if role not in ROLES:
        raise InvalidRole(f"Unknown role: {role}")

    with store.transaction():
        users = store.users()
        if any(u.email == email for u in users):
            raise DuplicateUser()
        user = User(id=f"user_{store.next_id()}", name=name, email=email, password=password, role=role)
        users.append(user)
        store.save_users(users)
        append_audit(store, ctx, "User registration", f"New user {name} registered")

    logger.info("user_registered", user_id=user.id, role=role)
    return user


def login(store: DomainStore, ctx: SessionContext, email: str, password: str) -> User:
    """Sign in, replacing whatever session was active."""
    email, password = _clean(email), _clean(password)
    if not email or not password:
        raise MissingCredentials()

    user = next((u for u in store.users() if u.email == email and u.password == password), None)
    if user is None:
        logger.info("user_login_failed", email=email)
        raise InvalidCredentials()

    previous = ctx.current_user
    ctx.current_user = user
    try:
        with store.transaction():
            store.save_current_user(user)
            append_audit(store, ctx, "User login", f"{user.name} signed in")
    except Exception:
        ctx.current_user = previous
        raise

    logger.info("user_login", user_id=user.id)
    return user


def logout(store: DomainStore, ctx: SessionContext) -> None:
    outgoing = ctx.current_user
    with store.transaction():
        if outgoing is not None:
            append_audit(store, ctx, "User logout", f"{outgoing.name} signed out")
        store.clear_current_user()
    ctx.current_user = None
    if outgoing is not None:
        logger.info("user_logout", user_id=outgoing.id)


def restore_session(store: DomainStore) -> SessionContext:
    """Session state persisted by a previous run."""
    return SessionContext.load(store)


def demo_account(store: DomainStore, role: str) -> User:
    """First stored account with ``role``, used to prefill demo logins."""
    user = next((u for u in store.users() if u.role == role), None)
    if user is None:
        raise UserNotFound(f"No user with role {role}")
    return user


def list_users(store: DomainStore, ctx: SessionContext):
    require_roles(ctx, "admin")
    return store.users()


def delete_user(store: DomainStore, ctx: SessionContext, user_id: str) -> User:
    admin = require_roles(ctx, "admin")
    with store.transaction():
        users = store.users()
        target = next((u for u in users if u.id == user_id), None)
        if target is None:
            raise UserNotFound()
        store.save_users([u for u in users if u.id != user_id])
        append_audit(store, ctx, "User deleted", f"User {target.name} was deleted")

    logger.info("user_deleted", user_id=user_id, by=admin.id)
    return target

from __future__ import annotations

import logging
import uuid

import jwt
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from .config import settings
from .db import get_db
from .models import Profile, ROLES


logger = logging.getLogger(__name__)


def get_identity(request: Request) -> str | None:
    """User id issued by the identity provider, from a bearer JWT or the session cookie."""
    header = request.headers.get("authorization")
    if header:
        scheme, _, token = header.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authorization must be: Bearer <token>")
        try:
            payload = jwt.decode(
                token,
                settings.SUPABASE_JWT_SECRET,
                algorithms=["HS256"],
                audience=settings.SUPABASE_JWT_AUDIENCE,
            )
        except jwt.InvalidTokenError as exc:
            logger.info("rejected access token: %s", exc)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid access token") from exc
        return payload.get("sub")
    return request.session.get("user_id")


def get_current_user(request: Request, db: Session = Depends(get_db)) -> Profile | None:
    identity = get_identity(request)
    request.state.identity = identity
    if not identity:
        request.state.user = None
        return None
    try:
        user_id = uuid.UUID(str(identity))
    except ValueError:
        request.state.user = None
        return None
    user = db.get(Profile, user_id)
    request.state.user = user
    return user


def require_user(request: Request, user: Profile | None = Depends(get_current_user)) -> Profile:
    if not user:
        if getattr(request.state, "identity", None):
            # signed in with the provider but never given a role here
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user


def require_editor(user: Profile = Depends(require_user)) -> Profile:
    if user.role not in ROLES:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user


def require_admin(user: Profile = Depends(require_user)) -> Profile:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user

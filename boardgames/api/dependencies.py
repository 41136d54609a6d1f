"""Resolves the calling principal from headers set by the upstream auth proxy."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from boardgames.config import Settings
from boardgames.domain.entities.principal import Principal


def principal_from_headers(request: Request, settings: Settings) -> Principal:
    name = request.headers.get(settings.user_header, "").strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required.",
        )
    raw_roles = request.headers.get(settings.roles_header, "")
    roles = [role.strip() for role in raw_roles.split(",") if role.strip()]
    return Principal.of(name, roles)

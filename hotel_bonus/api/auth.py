from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from hotel_bonus.api.responses import ok
from hotel_bonus.core.security import PasswordChecker
from hotel_bonus.schemas.auth import AuthIn

router = APIRouter(tags=["auth"])


def get_password_checker(request: Request) -> PasswordChecker:
    return request.app.state.password_checker


@router.post("/auth")
def check_password(payload: AuthIn, checker: PasswordChecker = Depends(get_password_checker)):
    # AuthValidationError / AuthenticationError разбирают обработчики в main.py
    checker.check(payload.password)
    return ok()

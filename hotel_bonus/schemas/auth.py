from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class AuthIn(BaseModel):
    # Пустой/отсутствующий пароль разбирает PasswordChecker, а не pydantic,
    # чтобы ответ был в общем формате {success, message}.
    password: Optional[str] = Field(default=None, max_length=256)

"""Pytest configuration and fixtures."""
from datetime import date
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from hotel_bonus.core.config import Settings
from hotel_bonus.core.database import Base
from hotel_bonus.core.security import hash_password
from hotel_bonus.main import create_app
from hotel_bonus.models import BonusBalance

TEST_PASSWORD = "Усадьба-2024"
# Мало итераций, чтобы тесты не тормозили
TEST_ITERATIONS = 1_000


@pytest.fixture(scope="session")
def password_hash() -> str:
    return hash_password(TEST_PASSWORD, iterations=TEST_ITERATIONS)


@pytest.fixture
def settings(password_hash: str) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        APP_ENV="production",
        AUTH_PASSWORD_HASH=password_hash,
        ALLOWED_ORIGINS="https://usadba4.ru",
    )


@pytest.fixture
def app(settings: Settings):
    application = create_app(settings)
    Base.metadata.create_all(bind=application.state.engine)
    yield application
    Base.metadata.drop_all(bind=application.state.engine)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app) -> Generator[Session, None, None]:
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def bonus_rows(db_session: Session) -> list[BonusBalance]:
    """Две записи одного гостя (старый и новый визит) и один гость на последнем уровне."""
    rows = [
        BonusBalance(
            phone="9161234567",
            last_name="Иванова",
            first_name="Мария",
            loyalty_level="1 СЕЗОН",
            bonus_balances=500,
            visits_total=1,
            last_date_visit=date(2023, 7, 1),
        ),
        BonusBalance(
            phone="9161234567",
            last_name="Иванова",
            first_name="Мария",
            loyalty_level="  2   сезона ",
            bonus_balances=1250.5,
            visits_total=2,
            last_date_visit=date(2024, 3, 5),
        ),
        BonusBalance(
            phone="9035550011",
            last_name="Петров",
            first_name="Олег",
            loyalty_level="4 СЕЗОНА",
            bonus_balances=9000,
            visits_total=12,
            last_date_visit=date(2024, 1, 10),
        ),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows

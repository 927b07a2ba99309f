import os
from datetime import datetime, timezone
from typing import Generator

import pytest
from dotenv import load_dotenv
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

load_dotenv(".env.test", override=True)

from sensorweb.db.base import Base
from sensorweb.db.models.series import Series


def make_db_url() -> str:
    db_url = os.getenv("DATABASE_URL")
    if db_url:
        if "connect_timeout=" not in db_url:
            sep = "&" if "?" in db_url else "?"
            db_url = f"{db_url}{sep}connect_timeout=3"
        return db_url

    db = os.getenv("POSTGRES_DB", "sensorweb_test")
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD", "123")
    host = os.getenv("POSTGRES_HOST", "127.0.0.1")
    port = os.getenv("POSTGRES_PORT", "55432")
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{db}?connect_timeout=3"


@pytest.fixture(scope="session")
def engine():
    url = make_db_url()
    eng = create_engine(url, pool_pre_ping=True)

    try:
        with eng.connect() as conn:
            conn.execute(text("SELECT 1"))
    except OperationalError as e:
        pytest.skip(f"Postgres is not available. DSN={url}. Error={repr(e)}")

    Base.metadata.create_all(eng)
    return eng


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        try:
            db.execute(text("TRUNCATE TABLE series RESTART IDENTITY CASCADE"))
            db.commit()
        except Exception:
            db.rollback()
        db.close()


@pytest.fixture(scope="function")
def stations(db_session) -> Session:
    first = datetime(2024, 1, 1, tzinfo=timezone.utc)
    last = datetime(2024, 6, 1, tzinfo=timezone.utc)
    for i in range(23):
        db_session.add(
            Series(
                label=f"station-{i:02d} temperature",
                feature=f"station-{i:02d}",
                procedure="thermometer",
                offering="air_temperature",
                phenomenon="temperature",
                published=i % 10 != 9,
                first_value_at=first,
                last_value_at=last,
            )
        )
    db_session.commit()
    return db_session

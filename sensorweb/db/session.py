from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from sensorweb.core.config import settings

engine = create_engine(settings.db_url, pool_pre_ping=True, future=True)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, future=True)

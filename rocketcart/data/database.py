# rocketcart/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from rocketcart.utils.settings import DATABASE_URL

Base = declarative_base()


def create_session_factory(url: str | None = None) -> sessionmaker:
    url = url or DATABASE_URL
    # sqlite + thread pool fastapi
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)

    # import modeli zeby SQLAlchemy zarejestrowal je w Base.metadata przed create_all
    from rocketcart.data import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

# storefront/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from storefront.utils.settings import DATABASE_URL

Base = declarative_base()


def make_engine(url: str = DATABASE_URL, **kwargs):
    #sqlite + watki fastapi -> check_same_thread off
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(bind=None) -> None:
    # import modeli, zeby trafily do Base.metadata przed create_all
    from storefront.data.models import KeyValueModel  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


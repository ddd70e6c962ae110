import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db.base import Base
from app.db.session import engine
from app.models.customer import Customer
from app.models.loan import Loan
from app.models.transaction import Transaction


def init_db() -> None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        if settings.auto_create_tables:
            Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logging.exception("DB Error: %s", e)
        raise SystemExit(1)

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.store import Store

__all__ = ["get_db", "get_store"]


def get_store(db: Session = Depends(get_db)) -> Store:
    return Store(db)

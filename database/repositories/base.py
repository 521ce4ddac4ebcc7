from sqlalchemy.orm import Session


class BaseRepository:
    """Repository bound to a caller-owned Session; the caller decides when to commit."""

    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

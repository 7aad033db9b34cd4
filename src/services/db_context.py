from contextlib import contextmanager
from typing import Hashable

from extensions import db
from src.scheduling.boundary import SlotLocks


@contextmanager
def db_context():
    """Provide a transactional scope around a series of DB operations."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


class BookingBoundary:
    """Slot lock held around a DB transaction: check-then-insert commits before the lock is released."""

    def __init__(self, locks: SlotLocks | None = None):
        self.locks = locks or SlotLocks()

    @contextmanager
    def __call__(self, key: Hashable):
        with self.locks(key):
            with db_context():
                yield

"""Keyed blob storage for small client-style records."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.sql import func

from scenelingo_app.core.extensions import db


class AppState(db.Model):
    """One serialized record per key.

    ``value`` holds raw text so that a corrupted payload can still be read
    back and rejected by the caller instead of failing inside the ORM.
    """

    __tablename__ = 'app_state'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @classmethod
    def get_value(cls, key: str) -> Optional[str]:
        """Return the raw stored text for ``key`` or None."""
        record = db.session.get(cls, key)
        return record.value if record is not None else None

    @classmethod
    def set_value(cls, key: str, value: str) -> None:
        """Insert or overwrite the text stored under ``key`` and commit."""
        record = db.session.get(cls, key)
        if record is None:
            record = cls(key=key, value=value)
            db.session.add(record)
        else:
            record.value = value
        db.session.commit()

    def __repr__(self):
        return f'<AppState {self.key}>'

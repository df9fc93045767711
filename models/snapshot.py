from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from config.database import Base


class AppSnapshot(Base):
    """
    Armazenamento chave/valor do PDV: um snapshot JSON do estado por chave.
    """

    __tablename__ = "app_snapshots"

    key = Column(String(100), primary_key=True)
    payload = Column(Text, nullable=False)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self):
        return f"<AppSnapshot(key='{self.key}', updated_at={self.updated_at})>"

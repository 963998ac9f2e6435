from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, String

from .database import Base


class SharedQuote(Base):
    """
    A quote configuration saved for sharing by short link.
    config_data is stored as sent and never interpreted by the server.
    """
    __tablename__ = "shared_quotes"

    id = Column(String(8), primary_key=True, index=True)
    quote_type = Column(String, nullable=False)   # "digital", "gravure", "giftbox", ...
    customer_name = Column(String, default="")
    config_data = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

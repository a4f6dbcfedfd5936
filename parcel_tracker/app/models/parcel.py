"""
Parcel database model.

One row per shipment. ``status`` holds the plain ``ParcelStatus`` value and
``created_at`` an RFC3339 string, both stored as text.
"""

from sqlalchemy import Column, Integer, String
from parcel_tracker.app.db.session import Base


class Parcel(Base):
    """
    Parcel model.
    
    ``number`` is assigned by the database on insert.
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, index=True)
    status = Column(String)
    address = Column(String)
    created_at = Column(String)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status}')>"

"""
Service catalog model
"""
import enum

from sqlalchemy import Column, Integer, String

from fieldops.db.base import Base


class Popularity(str, enum.Enum):
    MOST_REQUESTED = "most_requested"
    POPULAR = "popular"
    REGULAR = "regular"


class ServiceOffering(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    service_type = Column(String, nullable=False)  # ServiceType value
    image_url = Column(String, nullable=True)
    technicians_count = Column(Integer, nullable=False, default=0)
    popularity = Column(String, nullable=False, default=Popularity.REGULAR.value)

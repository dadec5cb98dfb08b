import uuid
from sqlalchemy import Column, String, Integer, Uuid
from sqlalchemy.orm import relationship
from .base import Base


class Survivor(Base):
    __tablename__ = 'survivors'
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    num = Column(Integer, nullable=False, unique=True)
    name = Column(String(255), nullable=False)

    documents = relationship("LifeSituationDocument", back_populates="survivor")

from sqlalchemy import JSON, BigInteger, Column, DateTime, Integer, String, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class AdvocateRow(Base):
    __tablename__ = "advocates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    city = Column(String, nullable=False)
    degree = Column(String, nullable=False)
    specialties = Column(JSON, nullable=False, default=list)  # JSON array of strings, display order
    years_of_experience = Column(Integer, nullable=False)
    phone_number = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


def create_all(engine: Engine) -> None:
    Base.metadata.create_all(engine)

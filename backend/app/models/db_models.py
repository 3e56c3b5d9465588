from sqlalchemy import Column, String, Integer, Date, UniqueConstraint
from app.database import Base


class PublicHoliday(Base):
    __tablename__ = "public_holidays"
    __table_args__ = (
        UniqueConstraint("jurisdiction", "holiday_date", name="uq_public_holidays_jurisdiction_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    jurisdiction = Column(String, index=True, nullable=False)
    holiday_date = Column(Date, nullable=False)
    name = Column(String, nullable=True)

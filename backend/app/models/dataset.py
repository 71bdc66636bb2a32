
# backend/app/models/dataset.py
from sqlalchemy import Column, Integer, String, Index
from app.db.database import Base

class DistrictData(Base):
    """One monthly snapshot for a district. Rows are only ever appended."""

    __tablename__ = "district_data"
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    district_code = Column(String(64), nullable=False, index=True)
    district_name = Column(String(128), nullable=False, index=True)
    fin_year = Column(String(32), nullable=False)
    month = Column(String(32), nullable=False)
    persondays_of_central_liability_so_far = Column(Integer)

    # Not unique: duplicates are measured by the dedup counter, not rejected.
    __table_args__ = (
        Index("ix_district_period", "fin_year", "month", "district_code"),
    )

    def __repr__(self):
        return (
            f"<DistrictData id={self.id} {self.district_code} "
            f"{self.fin_year}/{self.month}>"
        )

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.schemas import DistrictRecord, DistrictSummary, HealthStatus, MapDataEntry
from app.services import queries

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------- HEALTH ----------
@router.get("/api/v1/health", response_model=HealthStatus)
def health():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


# ---------- DISTRICTS ----------
@router.get("/districts", response_model=List[DistrictSummary])
def list_districts(db: Session = Depends(get_db)):
    """All distinct districts with their codes, sorted by name."""
    try:
        return queries.list_districts(db)
    except SQLAlchemyError:
        logger.exception("Error fetching districts")
        raise HTTPException(status_code=500, detail="Failed to fetch districts")


# ---------- DISTRICT RECORDS ----------
@router.get("/district-records/", response_model=List[DistrictRecord])
@router.get("/district-records/{district_code}", response_model=List[DistrictRecord])
def district_records(district_code: str = "", db: Session = Depends(get_db)):
    """Every record for one district, oldest insert first."""
    district_code = district_code.strip()
    if not district_code:
        raise HTTPException(status_code=400, detail="District code is required")

    try:
        records = queries.get_district_records(db, district_code)
    except SQLAlchemyError:
        logger.exception("Error fetching data for district %s", district_code)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch data for district {district_code}",
        )

    if not records:
        raise HTTPException(status_code=404, detail="No data found for this district code")
    return records


# ---------- MAP DATA ----------
@router.get("/map-data", response_model=List[MapDataEntry])
def map_data(db: Session = Depends(get_db)):
    """Latest persondays of central liability for each district."""
    try:
        return queries.get_map_data(db)
    except SQLAlchemyError:
        logger.exception("Error fetching map data")
        raise HTTPException(status_code=500, detail="Failed to fetch map data")


# ---------- ALL RECORDS ----------
@router.get("/all-district-records", response_model=List[DistrictRecord])
def all_district_records(db: Session = Depends(get_db)):
    try:
        return queries.list_all_records(db)
    except SQLAlchemyError:
        logger.exception("Error fetching all district records")
        raise HTTPException(status_code=500, detail="Failed to fetch all district records")

# backend/app/services/queries.py
"""Read-only queries over ``district_data``.

Every function takes an open session and returns plain rows; mapping empty
results or failures to HTTP statuses is left to the routes.
"""
import logging
from typing import Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.dataset import DistrictData

logger = logging.getLogger(__name__)


def list_districts(session: Session) -> List[Dict[str, str]]:
    """Distinct (code, name) pairs, alphabetical by name."""
    stmt = (
        select(DistrictData.district_code, DistrictData.district_name)
        .distinct()
        .order_by(DistrictData.district_name.asc(), DistrictData.district_code.asc())
    )
    districts = [dict(row) for row in session.execute(stmt).mappings()]
    logger.debug("Total districts: %d", len(districts))
    return districts


def get_district_records(session: Session, district_code: str) -> List[DistrictData]:
    stmt = (
        select(DistrictData)
        .where(DistrictData.district_code == district_code)
        .order_by(DistrictData.id.asc())
    )
    return list(session.scalars(stmt))


def list_all_records(session: Session) -> List[DistrictData]:
    stmt = select(DistrictData).order_by(DistrictData.id.asc())
    return list(session.scalars(stmt))


def get_map_data(session: Session) -> List[DistrictData]:
    """Latest row per district, where latest means highest id.

    This trusts insertion order to follow (fin_year, month). Loading an older
    month after a newer one makes the older month "latest" here.
    """
    latest = (
        select(
            DistrictData.district_code,
            func.max(DistrictData.id).label("max_id"),
        )
        .group_by(DistrictData.district_code)
        .subquery()
    )
    stmt = (
        select(DistrictData)
        .join(latest, DistrictData.id == latest.c.max_id)
        .order_by(DistrictData.district_name.asc(), DistrictData.district_code.asc())
    )
    return list(session.scalars(stmt))

# backend/app/services/etl_worker.py
import argparse
import logging

import pandas as pd
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db.database import Base, SessionLocal, engine
from app.models.dataset import DistrictData
from app.services.data_fetcher import fetch_dataset
from app.utils import clean_str, safe_int

logger = logging.getLogger(__name__)


def read_csv_rows(csv_path):
    """Rows of a dataset CSV as dicts of strings, blank lines skipped."""
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    return df.to_dict(orient="records")


def record_from_row(rec):
    district_code = clean_str(rec.get("district_code"))
    if not district_code:
        return None

    persondays = rec.get("persondays_of_central_liability_so_far")
    if persondays is None:
        persondays = rec.get("Persondays_of_Central_Liability_so_far")

    return DistrictData(
        district_code=district_code,
        district_name=clean_str(rec.get("district_name")),
        fin_year=clean_str(rec.get("fin_year") or rec.get("financial_year")),
        month=clean_str(rec.get("month")),
        persondays_of_central_liability_so_far=safe_int(persondays),
    )


def load_records(session, rows):
    """Append rows in the given order. Nothing is deduplicated or updated."""
    added = 0
    for rec in rows:
        record = record_from_row(rec)
        if record is None:
            logger.warning("Skipping row without district_code: %r", rec)
            continue
        session.add(record)
        added += 1
    session.flush()
    return added


def run_etl_once(source="api", csv_path=None, limit=5000):
    Base.metadata.create_all(bind=engine)

    if source == "csv":
        csv_path = csv_path or settings.CSV_PATH
        logger.info("Starting load from %s", csv_path)
        rows = read_csv_rows(csv_path)
    else:
        logger.info("Starting ETL fetch for %s", settings.STATE_NAME)
        rows = fetch_dataset(state=settings.STATE_NAME, limit=limit)

    if not rows:
        logger.warning("No records to load.")
        return 0

    logger.info("Fetched %d records", len(rows))
    session = SessionLocal()
    try:
        added = load_records(session, rows)
        session.commit()
        logger.info("ETL complete: %d records appended", added)
        return added
    except SQLAlchemyError:
        session.rollback()
        logger.exception("DB error during ETL")
        raise
    finally:
        session.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Append MGNREGA district rows to the database.")
    parser.add_argument("--csv", dest="csv_path", help="load from this CSV instead of the API")
    parser.add_argument("--limit", type=int, default=5000, help="API page size")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    source = "csv" if args.csv_path else "api"
    run_etl_once(source=source, csv_path=args.csv_path, limit=args.limit)


if __name__ == "__main__":
    main()

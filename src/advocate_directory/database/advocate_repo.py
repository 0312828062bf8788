"""Repository for the advocates table: listing adapter and seed operation."""

from typing import Iterable, List, Optional

from sqlalchemy import String, and_, column, func, or_, select
from sqlalchemy.orm import Session

from ..listing.conditions import (
    ArrayTextMatch,
    Condition,
    ConditionSet,
    RangeMax,
    RangeMin,
    SearchOr,
    TextMatch,
)
from ..listing.models import Advocate, SortOrder
from ..utils.logging import get_logger
from .client import StoreHandle
from .schema import AdvocateRow, create_all

logger = get_logger(__name__)

_COLUMNS = {
    "first_name": AdvocateRow.first_name,
    "last_name": AdvocateRow.last_name,
    "city": AdvocateRow.city,
    "degree": AdvocateRow.degree,
    "specialties": AdvocateRow.specialties,
    "years_of_experience": AdvocateRow.years_of_experience,
}

# Set-returning function yielding one "value" row per JSON array element
_ARRAY_ELEMENT_FUNCTIONS = {
    "postgresql": "json_array_elements_text",
    "sqlite": "json_each",
}


def _array_element_matches(field: str, needle: str, dialect_name: str):
    """EXISTS over the array elements of `field`, one substring test per element."""
    function_name = _ARRAY_ELEMENT_FUNCTIONS.get(dialect_name, "json_each")
    elements = getattr(func, function_name)(_COLUMNS[field]).table_valued(
        column("value", String), joins_implicitly=True
    )
    return (
        select(elements.c.value)
        .where(elements.c.value.icontains(needle, autoescape=True))
        .exists()
    )


def _translate(condition: Condition, dialect_name: str):
    """Translate one predicate into a SQLAlchemy clause."""
    if isinstance(condition, TextMatch):
        # autoescape keeps % and _ in the needle literal
        return _COLUMNS[condition.field].icontains(condition.needle, autoescape=True)
    if isinstance(condition, ArrayTextMatch):
        return _array_element_matches(condition.field, condition.needle, dialect_name)
    if isinstance(condition, SearchOr):
        return or_(*(_translate(alt, dialect_name) for alt in condition.alternatives()))
    if isinstance(condition, RangeMin):
        return _COLUMNS[condition.field] >= condition.value
    if isinstance(condition, RangeMax):
        return _COLUMNS[condition.field] <= condition.value
    raise TypeError(f"Unsupported condition: {condition!r}")


def build_where_clause(conditions: ConditionSet, dialect_name: str = "sqlite"):
    """AND of all translated predicates, or None for an empty condition set."""
    if not conditions:
        return None
    return and_(*(_translate(condition, dialect_name) for condition in conditions))


def row_to_advocate(row: AdvocateRow) -> Advocate:
    return Advocate(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        city=row.city,
        degree=row.degree,
        specialties=list(row.specialties or []),
        years_of_experience=row.years_of_experience,
        phone_number=row.phone_number,
    )


class RelationalAdapter:
    """Listing adapter backed by the advocates table."""

    name = "relational"

    def __init__(self, store: StoreHandle):
        self.store = store

    def count(self, conditions: ConditionSet) -> int:
        stmt = select(func.count()).select_from(AdvocateRow)
        where = build_where_clause(conditions, self.store.engine.dialect.name)
        if where is not None:
            stmt = stmt.where(where)
        with self.store.session() as session:
            return int(session.execute(stmt).scalar_one())

    def fetch(
        self,
        conditions: ConditionSet,
        sort_by: str,
        sort_order: SortOrder,
        offset: int,
        limit: int,
    ) -> List[Advocate]:
        sort_column = _COLUMNS[sort_by]
        # id ascending reproduces insertion order for ties
        stmt = select(AdvocateRow).order_by(
            sort_column.desc() if sort_order == "desc" else sort_column.asc(),
            AdvocateRow.id.asc(),
        )
        where = build_where_clause(conditions, self.store.engine.dialect.name)
        if where is not None:
            stmt = stmt.where(where)
        stmt = stmt.offset(offset).limit(limit)
        with self.store.session() as session:
            rows = session.execute(stmt).scalars().all()
            return [row_to_advocate(row) for row in rows]


def insert_advocates(session: Session, records: Iterable[Advocate]) -> List[AdvocateRow]:
    """Add advocate rows to the session (caller commits)."""
    rows = [
        AdvocateRow(
            first_name=record.first_name,
            last_name=record.last_name,
            city=record.city,
            degree=record.degree,
            specialties=list(record.specialties),
            years_of_experience=record.years_of_experience,
            phone_number=record.phone_number,
        )
        for record in records
    ]
    session.add_all(rows)
    return rows


def seed_advocates(store: StoreHandle, records: Optional[Iterable[Advocate]] = None) -> List[Advocate]:
    """
    Bulk-insert advocates into the store and return them with their ids.

    Creates the advocates table when it is missing. Defaults to the bundled
    fallback dataset. Running it twice inserts the records twice.

    Raises:
        ConnectivityError: If the store cannot be reached
    """
    if records is None:
        from ..data.fallback_advocates import load_fallback_advocates

        records = load_fallback_advocates()
    with store.session() as session:
        create_all(session.get_bind())
        rows = insert_advocates(session, records)
        session.commit()
        inserted = [row_to_advocate(row) for row in rows]
    logger.info("Seeded %d advocates", len(inserted))
    return inserted

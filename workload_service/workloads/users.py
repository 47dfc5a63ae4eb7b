"""
Deterministic synthetic user records.

Every field of record ``i`` is a pure function of ``i``, the lookup tables in
`workload_service.domain.tables` and a fixed base date. Categorical fields use
a multiplicative index ``(i * k) % len(table)`` with a distinct multiplier per
field so neighbouring records decorrelate. The multipliers, modulo targets and
table orderings are an output contract: changing any of them changes the
served dataset.
"""

from __future__ import annotations

import calendar
import time
from datetime import datetime, timedelta, timezone
from typing import Dict, Tuple

from workload_service.domain.models import Address, Company, User, UserPreferences
from workload_service.domain.tables import (
    CITIES,
    COMPANIES,
    DEPARTMENTS,
    FIRST_NAMES,
    LANGUAGES,
    LAST_NAMES,
    POSITIONS,
    STATES,
    STREETS,
    TAGS,
)
from workload_service.utils.logging import get_logger
from workload_service.workloads.abstract import AbstractWorkload, WorkloadResult

log = get_logger(__name__)

USER_COUNT = 10_000
BASE_DATE = datetime(2020, 1, 1, tzinfo=timezone.utc)
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

FIRST_NAME_MULTIPLIER = 7
LAST_NAME_MULTIPLIER = 11
CITY_MULTIPLIER = 13
STREET_MULTIPLIER = 17
STATE_MULTIPLIER = 19
COMPANY_MULTIPLIER = 23
DEPARTMENT_MULTIPLIER = 29
POSITION_MULTIPLIER = 31


def _pick(table: Tuple[str, ...], index: int, multiplier: int) -> str:
    return table[(index * multiplier) % len(table)]


def _add_years(moment: datetime, years: int) -> datetime:
    year = moment.year + years
    day = min(moment.day, calendar.monthrange(year, moment.month)[1])
    return moment.replace(year=year, day=day)


def _add_months(moment: datetime, months: int) -> datetime:
    total = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def format_timestamp(moment: datetime) -> str:
    """Render a UTC timestamp the way the record's JSON fields are rendered."""
    return moment.strftime(TIMESTAMP_FORMAT)


def select_tags(index: int) -> Tuple[str, ...]:
    """
    Pick ``3 + index % 6`` consecutive tags starting at ``index``.

    Duplicates are dropped keeping first-occurrence order, so the result can be
    shorter than the candidate count.
    """
    count = 3 + (index % 6)
    candidates = (TAGS[(index + j) % len(TAGS)] for j in range(count))
    return tuple(dict.fromkeys(candidates))


def build_metadata(index: int) -> Dict[str, str]:
    return {
        "LastLogin": format_timestamp(BASE_DATE + timedelta(days=index % 730)),
        "AccountStatus": "Inactive" if index % 10 == 0 else "Active",
        "VerificationLevel": str((index % 3) + 1),
        "ReferralCode": f"REF{index:06d}",
        "CustomerSince": format_timestamp(_add_months(BASE_DATE, -(index % 60))),
    }


def build_user(index: int) -> User:
    """
    Build the record at 1-based position ``index``.
    """
    first_name = _pick(FIRST_NAMES, index, FIRST_NAME_MULTIPLIER)
    last_name = _pick(LAST_NAMES, index, LAST_NAME_MULTIPLIER)
    age = 25 + (index % 50)
    years_at_company = 1 + (index % 15)
    day_offset = timedelta(days=index % 365)

    return User(
        id=index,
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}{index}@example.com",
        phone_number=(
            f"+1-{200 + (index % 800):03d}-{100 + (index % 900):03d}-{1000 + (index % 9000):04d}"
        ),
        date_of_birth=_add_years(BASE_DATE, -age) + day_offset,
        address=Address(
            street=f"{100 + (index % 9900)} {_pick(STREETS, index, STREET_MULTIPLIER)}",
            city=_pick(CITIES, index, CITY_MULTIPLIER),
            state=_pick(STATES, index, STATE_MULTIPLIER),
            zip_code=f"{10000 + (index % 89999):05d}",
            country="USA",
        ),
        company=Company(
            name=_pick(COMPANIES, index, COMPANY_MULTIPLIER),
            department=_pick(DEPARTMENTS, index, DEPARTMENT_MULTIPLIER),
            position=_pick(POSITIONS, index, POSITION_MULTIPLIER),
            salary=40_000 + (index % 160_000),
            start_date=_add_years(BASE_DATE, years_at_company) + day_offset,
        ),
        preferences=UserPreferences(
            theme="Dark" if index % 2 == 0 else "Light",
            language=LANGUAGES[index % 3],
            notifications_enabled=index % 3 != 0,
            newsletter=index % 4 != 0,
            two_factor_enabled=index % 5 == 0,
        ),
        metadata=build_metadata(index),
        tags=select_tags(index),
        is_active=index % 10 != 0,
        created_at=BASE_DATE + timedelta(days=index % 1825),
        updated_at=BASE_DATE + timedelta(days=1825 + (index % 365)),
    )


def generate(n: int) -> Tuple[User, ...]:
    """
    Generate records 1..n in index order.
    """
    return tuple(build_user(i) for i in range(1, n + 1))


class UserGenerationWorkload(AbstractWorkload):
    """
    Build the full fixed-size user dataset once.

    Pure object construction: no serialization, no I/O.
    """

    name: str = "users"
    description: str = f"Construct {USER_COUNT:,} synthetic user records in memory."

    def execute(self) -> WorkloadResult:
        start_time = time.perf_counter()
        users = generate(USER_COUNT)
        duration_seconds = time.perf_counter() - start_time
        log.debug("Generated user records", extra={"items": len(users)})

        return WorkloadResult(
            items=len(users),
            duration_seconds=duration_seconds,
            throughput_items_per_sec=len(users) / duration_seconds if duration_seconds > 0 else 0.0,
            notes="Records built, not serialized.",
        )


__all__ = [
    "BASE_DATE",
    "USER_COUNT",
    "UserGenerationWorkload",
    "build_user",
    "format_timestamp",
    "generate",
    "select_tags",
]

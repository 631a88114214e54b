"""
Projection of selected rows into display-ready views.

Every field degrades to the placeholder on missing or malformed input;
a single bad cell never drops the offering.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from .formatters import date_only, left_of_double_dash, safe_text, to_sentence_case
from .models import OfferingView
from .normalize import FIELD_KEYS, FieldKeys
from .rules import ENROLLMENT_URL_TEMPLATE, UNNAMED_PROGRAM


def enrollment_url(ficha: str) -> str:
    # Interpolated verbatim, the same way the public catalogue link is built.
    return ENROLLMENT_URL_TEMPLATE.format(ficha=ficha)


def project_offering(row: Mapping[str, Optional[str]], keys: FieldKeys = FIELD_KEYS) -> OfferingView:
    program_name = safe_text(left_of_double_dash(row.get(keys.program)), UNNAMED_PROGRAM).upper()
    ficha = safe_text(row.get(keys.ficha))
    schedule = safe_text(to_sentence_case(row.get(keys.schedule)))
    start_time = safe_text(row.get(keys.start_time))
    end_time = safe_text(row.get(keys.end_time))
    environment = safe_text(to_sentence_case(row.get(keys.environment)))

    return OfferingView(
        program_name=program_name,
        ficha=ficha,
        start_date=safe_text(date_only(row.get(keys.start))),
        end_date=safe_text(date_only(row.get(keys.end))),
        closing_date=safe_text(date_only(row.get(keys.closing))),
        schedule=schedule,
        start_time=start_time,
        end_time=end_time,
        environment=environment,
        observation=f"Horario: {schedule} {start_time} a {end_time}. Ambiente: {environment}.",
        enrollment_url=enrollment_url(ficha),
    )


def project_offerings(rows: Iterable[Mapping[str, Optional[str]]], keys: FieldKeys = FIELD_KEYS) -> List[OfferingView]:
    return [project_offering(row, keys) for row in rows]

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import optional_number, optional_str, require_non_empty, require_number
from ..core.exceptions import NotFoundError, ValidationError
from .model import Result, ResultSummary, SubjectGrade
from .repository import ResultRepository

logger = logging.getLogger(__name__)


def _parse_subject(item: Any, index: int) -> SubjectGrade:
    if not isinstance(item, Mapping):
        raise ValidationError(f"Subject {index}: must be a JSON object")
    return SubjectGrade(
        subject=require_non_empty(item.get("subject"), f"Subject {index}: subject"),
        grade=optional_str(item.get("grade"), f"Subject {index}: grade"),
        credit=optional_number(item.get("credit"), f"Subject {index}: credit"),
        grade_point=optional_number(item.get("gradePoint"), f"Subject {index}: gradePoint"),
        result=optional_str(item.get("result"), f"Subject {index}: result"),
    )


class ResultService:
    """Use case: store and look up semester results."""

    def __init__(self, results: ResultRepository):
        self._results = results

    def add_result(self, payload: Any) -> Result:
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")

        name = require_non_empty(payload.get("name"), "name")
        rrn = require_non_empty(payload.get("rrn"), "rrn")
        sgpa = require_number(payload.get("sgpa"), "sgpa")

        raw_subjects = payload.get("subjects", [])
        if not isinstance(raw_subjects, list):
            raise ValidationError("subjects must be a list")
        subjects = tuple(_parse_subject(item, i) for i, item in enumerate(raw_subjects))

        result_id = self._results.create(name=name, rrn=rrn, sgpa=sgpa, subjects=subjects)
        logger.info(f"Result {result_id} added for rrn={rrn} ({len(subjects)} subjects)")
        return Result(result_id=result_id, name=name, rrn=rrn, sgpa=sgpa, subjects=subjects)

    def list_summaries(self) -> Sequence[ResultSummary]:
        return self._results.list_summaries()

    def get_by_rrn(self, rrn: Optional[str]) -> Result:
        if not rrn or not rrn.strip():
            raise ValidationError("RRN parameter is required.")
        result = self._results.get_by_rrn(rrn.strip())
        if not result:
            raise NotFoundError("Result not found for the provided RRN.")
        return result

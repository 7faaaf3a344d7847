"""
Job search filter.

Narrows an in-memory snapshot of jobs by the criteria of the search form.
Pure and order-preserving: the result keeps the input order.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

INDUSTRIES = ["Manufacturing", "Mechanical", "Electrical", "Civil", "Oil & Gas", "Construction"]
JOB_TYPES = ["full-time", "part-time", "contract"]
SHIFT_TYPES = ["day", "night", "rotating"]


class JobCriteria(BaseModel):
    """
    Search form state. Absent or empty fields do not constrain the result.

    Keys may be given in snake_case or in the form's camelCase
    (`jobType`, `experienceMin`). Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    text: str | None = None
    location: str | None = None
    industry: str | None = None
    job_type: str | None = None
    shift_type: str | None = None
    experience_min: int | None = None
    experience_max: int | None = None

    @field_validator("text", "location", "industry", "job_type", "shift_type", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("experience_min", "experience_max", mode="before")
    @classmethod
    def blank_number_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


def _field(job: Any, name: str) -> Any:
    if isinstance(job, Mapping):
        return job.get(name)
    return getattr(job, name, None)


def _contains(haystack: Any, needle: str) -> bool:
    return needle.lower() in str(haystack or "").lower()


def matches(job: Any, criteria: JobCriteria) -> bool:
    """True if the job satisfies every active criterion."""
    if criteria.text is not None:
        if not (
            _contains(_field(job, "title"), criteria.text)
            or _contains(_field(job, "description"), criteria.text)
        ):
            return False

    if criteria.location is not None and not _contains(_field(job, "location"), criteria.location):
        return False

    if criteria.industry is not None and _field(job, "industry_category") != criteria.industry:
        return False
    if criteria.job_type is not None and _field(job, "job_type") != criteria.job_type:
        return False
    if criteria.shift_type is not None and _field(job, "shift_type") != criteria.shift_type:
        return False

    if criteria.experience_min is not None:
        job_min = _field(job, "experience_min")
        if job_min is None or job_min < criteria.experience_min:
            return False

    if criteria.experience_max is not None:
        # A job without an upper bound does not satisfy a maximum
        job_max = _field(job, "experience_max")
        if job_max is None or job_max > criteria.experience_max:
            return False

    return True


def filter_jobs(jobs: Iterable[Any], criteria: JobCriteria | Mapping | None = None) -> list:
    """Return the jobs matching all criteria, in input order."""
    if criteria is None:
        criteria = JobCriteria()
    elif not isinstance(criteria, JobCriteria):
        criteria = JobCriteria.model_validate(dict(criteria))

    jobs = list(jobs)
    if criteria.is_empty():
        return jobs
    return [job for job in jobs if matches(job, criteria)]

"""Client-side job search filtering."""

from jobboard.search.filters import INDUSTRIES, JOB_TYPES, SHIFT_TYPES, JobCriteria, filter_jobs

__all__ = ["INDUSTRIES", "JOB_TYPES", "SHIFT_TYPES", "JobCriteria", "filter_jobs"]

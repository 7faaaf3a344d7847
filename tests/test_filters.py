"""Tests for the job search filter."""

import pytest
from pydantic import ValidationError

from jobboard.search import JobCriteria, filter_jobs


def _job(**kw: object) -> dict:
    job: dict[str, object] = {
        "title": "Maintenance Technician",
        "description": "Keep the press line running.",
        "location": "Houston, TX",
        "industry_category": "Mechanical",
        "job_type": "full-time",
        "shift_type": "day",
        "experience_min": 2,
        "experience_max": 6,
    }
    job.update(kw)
    return job


JOBS = [
    _job(title="CNC Machinist", industry_category="Manufacturing", location="Detroit, MI", experience_min=1, experience_max=3),
    _job(title="Industrial Electrician", industry_category="Electrical", shift_type="night", experience_min=5, experience_max=10),
    _job(title="Rig Welder", description="Pipeline welding.", industry_category="Oil & Gas", job_type="contract", experience_max=None),
    _job(title="Site Supervisor", industry_category="Construction", job_type="part-time", shift_type="rotating", experience_min=None),
]


def _titles(jobs: list) -> list[str]:
    return [j["title"] for j in jobs]


class TestFilterJobs:
    def test_no_criteria_keeps_everything_in_order(self) -> None:
        assert filter_jobs(JOBS) == JOBS
        assert filter_jobs(JOBS, JobCriteria()) == JOBS
        assert filter_jobs(JOBS, {}) == JOBS

    def test_blank_strings_do_not_constrain(self) -> None:
        criteria = JobCriteria(text="  ", location="", industry="", experience_min="")
        assert criteria.is_empty()
        assert filter_jobs(JOBS, criteria) == JOBS

    def test_text_matches_title_or_description_case_insensitive(self) -> None:
        assert _titles(filter_jobs(JOBS, {"text": "cnc"})) == ["CNC Machinist"]
        assert _titles(filter_jobs(JOBS, {"text": "PIPELINE"})) == ["Rig Welder"]

    def test_location_substring(self) -> None:
        assert _titles(filter_jobs(JOBS, {"location": "detroit"})) == ["CNC Machinist"]

    def test_industry_exact(self) -> None:
        assert _titles(filter_jobs(JOBS, {"industry": "Electrical"})) == ["Industrial Electrician"]
        assert filter_jobs(JOBS, {"industry": "electrical"}) == []

    def test_job_type_and_shift(self) -> None:
        assert _titles(filter_jobs(JOBS, {"job_type": "contract"})) == ["Rig Welder"]
        assert _titles(filter_jobs(JOBS, {"shift_type": "night"})) == ["Industrial Electrician"]

    def test_experience_min(self) -> None:
        # Jobs without a minimum fail an active minimum criterion
        assert _titles(filter_jobs(JOBS, {"experience_min": 2})) == ["Industrial Electrician", "Rig Welder"]

    def test_experience_max(self) -> None:
        # Jobs without a maximum fail an active maximum criterion
        assert _titles(filter_jobs(JOBS, {"experience_max": 6})) == ["CNC Machinist", "Site Supervisor"]

    def test_criteria_combine(self) -> None:
        criteria = {"industry": "Manufacturing", "location": "Detroit", "job_type": "full-time"}
        assert _titles(filter_jobs(JOBS, criteria)) == ["CNC Machinist"]
        criteria["shift_type"] = "night"
        assert filter_jobs(JOBS, criteria) == []

    def test_result_is_subset(self) -> None:
        result = filter_jobs(JOBS, {"text": "e"})
        assert all(job in JOBS for job in result)

    def test_works_on_objects(self) -> None:
        class Row:
            def __init__(self, **kw: object) -> None:
                self.__dict__.update(kw)

        rows = [Row(**job) for job in JOBS]
        assert [r.title for r in filter_jobs(rows, {"industry": "Construction"})] == ["Site Supervisor"]


class TestSearchFormScenarios:
    def test_industry_exact_of_two(self) -> None:
        jobs = [{"industry_category": "Manufacturing"}, {"industry_category": "Electrical"}]
        assert filter_jobs(jobs, {"industry": "Manufacturing"}) == [jobs[0]]

    def test_experience_min_of_two(self) -> None:
        jobs = [{"experience_min": 3}, {"experience_min": 7}]
        assert filter_jobs(jobs, {"experience_min": 5}) == [jobs[1]]

    def test_conjunction_excludes_partial_matches(self) -> None:
        jobs = [
            {"industry_category": "Manufacturing", "job_type": "full-time"},
            {"industry_category": "Manufacturing", "job_type": "contract"},
            {"industry_category": "Electrical", "job_type": "full-time"},
        ]
        assert filter_jobs(jobs, {"industry": "Manufacturing", "job_type": "full-time"}) == [jobs[0]]


class TestCriteriaKeys:
    def test_camel_case_keys(self) -> None:
        jobs = [{"experience_min": 3}, {"experience_min": 7}]
        assert filter_jobs(jobs, {"experienceMin": 5}) == [jobs[1]]

        jobs = [
            {"industry_category": "Manufacturing", "job_type": "full-time"},
            {"industry_category": "Manufacturing", "job_type": "contract"},
        ]
        assert filter_jobs(jobs, {"industry": "Manufacturing", "jobType": "full-time"}) == [jobs[0]]

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            filter_jobs(JOBS, {"experiense_min": 5})
        with pytest.raises(ValidationError):
            JobCriteria(salary=50000)

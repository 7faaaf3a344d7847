"""Tests for profile, job, application, notification and dashboard services."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from jobboard.auth import Role
from jobboard.db import Job, JobSkill, Notification, SeekerProfileRow, Skill
from jobboard.errors import JobBoardError, NotFound, PermissionDenied, RoleUndetermined, StoreError
from jobboard.services import applications, dashboards, jobs, notifications, profiles


@pytest.fixture()
def employer(make_account):  # type: ignore[no-untyped-def]
    session, _ = make_account(Role.EMPLOYER, email="hr@acme.com", name="Acme Fabrication")
    return session.identity.id


@pytest.fixture()
def seeker(make_account):  # type: ignore[no-untyped-def]
    session, _ = make_account(Role.SEEKER, email="sam@example.com", name="Sam Seeker")
    return session.identity.id


class TestProfiles:
    def test_completion_grows_with_fields_and_skills(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        assert db.get(SeekerProfileRow, seeker).profile_completion == 20

        profile = profiles.update_profile(db, seeker, Role.SEEKER, {"location": "Tulsa, OK", "bio": "  "})
        assert profile.location == "Tulsa, OK"
        assert profile.profile_completion == 30

        profiles.add_user_skill(db, seeker, "Welding")
        assert db.get(SeekerProfileRow, seeker).profile_completion == 40

    def test_fields_of_the_other_role_are_ignored(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        profile = profiles.update_profile(db, seeker, Role.SEEKER, {"company_name": "Nope", "phone": "555-0100"})
        assert profile.phone == "555-0100"
        assert not hasattr(profile, "company_name")

    def test_employer_update(self, db, employer) -> None:  # type: ignore[no-untyped-def]
        profile = profiles.update_profile(db, employer, Role.EMPLOYER, {"industry_type": "Manufacturing"})
        assert profile.industry_type == "Manufacturing"

    def test_update_without_role(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(RoleUndetermined):
            profiles.update_profile(db, seeker, None, {"location": "x"})

    def test_duplicate_skill(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        profiles.add_user_skill(db, seeker, "Welding")
        with pytest.raises(JobBoardError, match="already on profile"):
            profiles.add_user_skill(db, seeker, "welding")
        assert len(profiles.list_user_skills(db, seeker)) == 1

    def test_remove_skill_recomputes(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        user_skill = profiles.add_user_skill(db, seeker, "Rigging")
        profiles.remove_user_skill(db, seeker, user_skill.id)
        assert db.get(SeekerProfileRow, seeker).profile_completion == 20
        with pytest.raises(NotFound):
            profiles.remove_user_skill(db, seeker, user_skill.id)

    def test_education_and_certifications(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        entry = profiles.add_education(db, seeker, {"degree": "Diploma", "institution": "Tulsa Tech"})
        cert = profiles.add_certification(db, seeker, {"name": "AWS D1.1"})
        assert [e.id for e in profiles.list_education(db, seeker)] == [entry.id]
        assert [c.id for c in profiles.list_certifications(db, seeker)] == [cert.id]

        profiles.remove_education(db, seeker, entry.id)
        profiles.remove_certification(db, seeker, cert.id)
        assert profiles.list_education(db, seeker) == []
        assert profiles.list_certifications(db, seeker) == []


class TestJobs:
    def test_post_job_links_unique_skills(self, db, employer) -> None:  # type: ignore[no-untyped-def]
        job = jobs.post_job(
            db,
            employer,
            {"title": "Pipe Welder", "description": "Structural and pipe welding."},
            skills=["Welding", " welding ", "Blueprint Reading", ""],
        )
        assert job.status == "active"
        assert sorted(js.skill.name for js in job.job_skills) == ["Blueprint Reading", "Welding"]

    def test_post_job_is_all_or_nothing(self, db, employer, monkeypatch) -> None:  # type: ignore[no-untyped-def]
        def broken(db, name, category="technical"):  # type: ignore[no-untyped-def]
            raise SQLAlchemyError("skill insert failed")

        monkeypatch.setattr(jobs, "get_or_create_skill", broken)
        with pytest.raises(StoreError):
            jobs.post_job(db, employer, {"title": "Pipe Welder", "description": "x"}, skills=["Welding"])

        assert db.query(Job).count() == 0
        assert db.query(JobSkill).count() == 0

    def test_post_job_without_skills(self, db, employer) -> None:  # type: ignore[no-untyped-def]
        job = jobs.post_job(db, employer, {"title": "Forklift Operator", "description": "Warehouse."})
        assert job.job_skills == []
        assert db.query(Skill).count() == 0

    def test_paused_job_hidden_from_others(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        jobs.toggle_job_status(db, job.id, employer)

        assert jobs.get_job(db, job.id, viewer_id=employer).status == "paused"
        with pytest.raises(NotFound):
            jobs.get_job(db, job.id, viewer_id=seeker)
        assert jobs.search_jobs(db) == []

        jobs.toggle_job_status(db, job.id, employer)
        assert [j.id for j in jobs.search_jobs(db)] == [job.id]

    def test_only_owner_manages(self, db, employer, make_account, make_job) -> None:  # type: ignore[no-untyped-def]
        other, _ = make_account(Role.EMPLOYER, email="hr@rival.com", name="Rival Works")
        job = make_job(employer)
        with pytest.raises(PermissionDenied):
            jobs.toggle_job_status(db, job.id, other.identity.id)
        with pytest.raises(PermissionDenied):
            jobs.delete_job(db, job.id, other.identity.id)

    def test_search_uses_criteria(self, db, employer, make_job) -> None:  # type: ignore[no-untyped-def]
        make_job(employer, title="CNC Machinist")
        make_job(employer, title="Electrician", industry_category="Electrical")
        results = jobs.search_jobs(db, {"industry": "Electrical"})
        assert [j.title for j in results] == ["Electrician"]

    def test_delete_cascades(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        applications.apply_to_job(db, job.id, seeker)
        jobs.delete_job(db, job.id, employer)
        assert db.query(Job).count() == 0
        assert applications.list_seeker_applications(db, seeker) == []


class TestApplications:
    def test_apply_notifies_employer(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        profiles.update_profile(db, seeker, Role.SEEKER, {"resume_url": "https://files.example.com/sam.pdf"})
        job = make_job(employer)

        application = applications.apply_to_job(db, job.id, seeker, cover_letter="Ten years on the floor.")
        assert application.status == "applied"
        assert application.resume_url == "https://files.example.com/sam.pdf"
        assert applications.has_applied(db, job.id, seeker)

        [notification] = notifications.list_notifications(db, employer)
        assert notification.type == "new_application"
        assert notification.link == f"/employer/jobs/{job.id}/applicants"

    def test_cannot_apply_twice(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        applications.apply_to_job(db, job.id, seeker)
        with pytest.raises(JobBoardError, match="already applied"):
            applications.apply_to_job(db, job.id, seeker)

    def test_cannot_apply_to_paused_job(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer, status="paused")
        with pytest.raises(NotFound):
            applications.apply_to_job(db, job.id, seeker)

    def test_status_change_notifies_seeker(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        application = applications.apply_to_job(db, job.id, seeker)

        updated = applications.update_application_status(db, application.id, employer, "shortlisted")
        assert updated.status == "shortlisted"
        [notification] = notifications.list_notifications(db, seeker)
        assert notification.link == f"/jobs/{job.id}"

        # Same status again: no second notification
        applications.update_application_status(db, application.id, employer, "shortlisted")
        assert notifications.unread_count(db, seeker) == 1

    def test_status_validation_and_ownership(self, db, employer, seeker, make_account, make_job) -> None:  # type: ignore[no-untyped-def]
        other, _ = make_account(Role.EMPLOYER, email="hr@rival.com", name="Rival Works")
        job = make_job(employer)
        application = applications.apply_to_job(db, job.id, seeker)

        with pytest.raises(JobBoardError, match="Unknown application status"):
            applications.update_application_status(db, application.id, employer, "hired")
        with pytest.raises(PermissionDenied):
            applications.update_application_status(db, application.id, other.identity.id, "viewed")
        with pytest.raises(PermissionDenied):
            applications.list_applicants(db, job.id, other.identity.id)

    def test_list_applicants_filter_and_counts(self, db, employer, seeker, make_account, make_job) -> None:  # type: ignore[no-untyped-def]
        kim, _ = make_account(Role.SEEKER, email="kim@example.com", name="Kim Seeker")
        job = make_job(employer)
        first = applications.apply_to_job(db, job.id, seeker)
        applications.apply_to_job(db, job.id, kim.identity.id)
        applications.update_application_status(db, first.id, employer, "rejected")

        _, everyone = applications.list_applicants(db, job.id, employer, "all")
        _, rejected = applications.list_applicants(db, job.id, employer, "rejected")
        assert len(everyone) == 2
        assert [a.id for a in rejected] == [first.id]
        assert applications.status_counts(everyone) == {"applied": 1, "viewed": 0, "shortlisted": 0, "rejected": 1}

    def test_employer_notes(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        application = applications.apply_to_job(db, job.id, seeker)
        saved = applications.save_employer_notes(db, application.id, employer, "Call back Monday")
        assert saved.employer_notes == "Call back Monday"


class TestNotifications:
    def test_read_flags(self, db, seeker) -> None:  # type: ignore[no-untyped-def]
        first = notifications.notify(db, seeker, type="system", title="Welcome")
        notifications.notify(db, seeker, type="system", title="Tips")
        db.commit()
        assert notifications.unread_count(db, seeker) == 2

        notifications.mark_read(db, seeker, first.id)
        assert notifications.unread_count(db, seeker) == 1
        assert len(notifications.list_notifications(db, seeker, unread_only=True)) == 1

        assert notifications.mark_all_read(db, seeker) == 1
        assert notifications.unread_count(db, seeker) == 0

    def test_cannot_read_someone_elses(self, db, seeker, employer) -> None:  # type: ignore[no-untyped-def]
        notification = notifications.notify(db, employer, type="system", title="Hi")
        db.commit()
        with pytest.raises(NotFound):
            notifications.mark_read(db, seeker, notification.id)
        assert db.get(Notification, notification.id).read is False


class TestDashboards:
    def test_seeker_dashboard(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        make_job(employer, title="Second shift lead")
        applications.apply_to_job(db, job.id, seeker)

        data = dashboards.seeker_dashboard(db, seeker)
        assert [a.job_id for a in data["applications"]] == [job.id]
        assert len(data["recommended_jobs"]) == 2
        assert data["status_counts"]["applied"] == 1
        assert data["profile_completion"] == 20

    def test_employer_dashboard(self, db, employer, seeker, make_job) -> None:  # type: ignore[no-untyped-def]
        job = make_job(employer)
        make_job(employer, title="Paused role", status="paused")
        application = applications.apply_to_job(db, job.id, seeker)
        applications.update_application_status(db, application.id, employer, "shortlisted")

        data = dashboards.employer_dashboard(db, employer)
        assert len(data["jobs"]) == 2
        assert data["application_counts"] == {job.id: 1}
        assert data["stats"] == {
            "total_jobs": 2,
            "active_jobs": 1,
            "total_applications": 1,
            "shortlisted": 1,
        }

"""
Tests for the job accessor (jobly.crud.job) against the database directly.
"""

import pytest

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.crud import job as job_crud
from jobly.models.job import Job
from jobly.schemas.job import JobCreateRequest, JobUpdateRequest


def make_request(**overrides) -> JobCreateRequest:
    data = {"id": 10, "title": "New Job", "salary": 500, "equity": 0.5, "companyHandle": "c1"}
    data.update(overrides)
    return JobCreateRequest(**data)


class TestCreate:

    def test_create(self, db_session):
        job = job_crud.create(db_session, make_request())

        assert job.id == 10
        assert job.title == "New Job"
        assert job.salary == 500
        assert job.equity == 0.5
        assert job.company_handle == "c1"
        assert db_session.get(Job, 10) is not None

    def test_create_nullable_fields(self, db_session):
        job = job_crud.create(db_session, make_request(salary=None, equity=None))

        assert job.salary is None
        assert job.equity is None

    def test_duplicate_id_rejected_without_write(self, db_session, seeded_jobs):
        with pytest.raises(BadRequestError) as exc_info:
            job_crud.create(db_session, make_request(id=1, title="Other"))

        assert "Duplicate job: 1" in str(exc_info.value)
        assert db_session.query(Job).count() == 3
        assert db_session.get(Job, 1).title == "Software Engineer"

    def test_duplicate_inserted_after_check(self, db_session, seeded_jobs, monkeypatch):
        """The row appears between the existence check and the commit"""
        db_session.expunge_all()
        monkeypatch.setattr(db_session, "get", lambda *args, **kwargs: None)

        with pytest.raises(BadRequestError) as exc_info:
            job_crud.create(db_session, make_request(id=1, title="Other"))

        assert "Duplicate job: 1" in str(exc_info.value)
        # Session was rolled back and is still usable
        assert db_session.query(Job).count() == 3
        assert db_session.query(Job).filter(Job.id == 1).one().title == "Software Engineer"


class TestFindAll:

    def test_no_filter_ordered_by_title(self, db_session, seeded_jobs):
        jobs = job_crud.find_all(db_session)
        assert [j.title for j in jobs] == ["Accountant", "Data engineer", "Software Engineer"]

    def test_empty_table(self, db_session):
        assert job_crud.find_all(db_session) == []

    def test_title_is_case_insensitive_partial_match(self, db_session, seeded_jobs):
        jobs = job_crud.find_all(db_session, title="engineer")
        assert [j.id for j in jobs] == [3, 1]

    def test_min_salary(self, db_session, seeded_jobs):
        jobs = job_crud.find_all(db_session, min_salary=100000)
        assert [j.id for j in jobs] == [1]

    def test_zero_min_salary_applies_no_filter(self, db_session, seeded_jobs):
        assert len(job_crud.find_all(db_session, min_salary=0)) == 3

    def test_has_equity_true(self, db_session, seeded_jobs):
        jobs = job_crud.find_all(db_session, has_equity=True)
        assert [j.id for j in jobs] == [1]

    def test_has_equity_false_applies_no_filter(self, db_session, seeded_jobs):
        assert len(job_crud.find_all(db_session, has_equity=False)) == 3

    def test_combined_filters(self, db_session, seeded_jobs):
        jobs = job_crud.find_all(db_session, title="engineer", min_salary=1, has_equity=True)
        assert [j.id for j in jobs] == [1]

    @pytest.mark.parametrize("title", ["_", "%", "\\"])
    def test_title_wildcards_match_literally(self, db_session, seeded_jobs, title):
        assert job_crud.find_all(db_session, title=title) == []

    def test_title_with_literal_percent(self, db_session, seeded_jobs):
        job_crud.create(db_session, make_request(title="Remote 100% Engineer"))

        jobs = job_crud.find_all(db_session, title="100%")
        assert [j.id for j in jobs] == [10]

    def test_no_match(self, db_session, seeded_jobs):
        assert job_crud.find_all(db_session, title="nope") == []


class TestGet:

    def test_get_by_title(self, db_session, seeded_jobs):
        job = job_crud.get(db_session, "Accountant")
        assert job.id == 2

    def test_get_by_title_is_exact(self, db_session, seeded_jobs):
        with pytest.raises(NotFoundError):
            job_crud.get(db_session, "accountant")

    def test_get_by_title_not_found(self, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            job_crud.get(db_session, "nope")
        assert "No job: nope" in str(exc_info.value)

    def test_get_by_id(self, db_session, seeded_jobs):
        assert job_crud.get_by_id(db_session, 3).title == "Data engineer"

    def test_get_by_id_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            job_crud.get_by_id(db_session, 999)


class TestUpdate:

    def test_update_only_supplied_fields(self, db_session, seeded_jobs):
        job = job_crud.update(db_session, 1, JobUpdateRequest(salary=5))

        assert job.salary == 5
        assert job.title == "Software Engineer"
        assert job.equity == 0.05
        assert job.company_handle == "c1"

    def test_update_can_clear_nullable_field(self, db_session, seeded_jobs):
        job = job_crud.update(db_session, 1, JobUpdateRequest(equity=None))
        assert job.equity is None
        assert job.salary == 150000

    def test_update_multiple_fields(self, db_session, seeded_jobs):
        job = job_crud.update(db_session, 2, JobUpdateRequest(title="Senior Accountant", salary=70000))
        assert job.title == "Senior Accountant"
        assert job.salary == 70000

    def test_update_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            job_crud.update(db_session, 999, JobUpdateRequest(salary=5))

    def test_update_empty_patch(self, db_session, seeded_jobs):
        with pytest.raises(BadRequestError):
            job_crud.update(db_session, 1, JobUpdateRequest())


class TestRemove:

    def test_remove(self, db_session, seeded_jobs):
        job_crud.remove(db_session, 1)

        assert 1 not in [j.id for j in job_crud.find_all(db_session)]
        assert db_session.query(Job).count() == 2

    def test_remove_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            job_crud.remove(db_session, 999)

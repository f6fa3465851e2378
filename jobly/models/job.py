from sqlalchemy import Column, Integer, String, Float, CheckConstraint
from jobly.core.database import Base


class Job(Base):
    """
    Job model representing an open position owned by a company.

    The id is supplied by the caller, not generated by the database.
    company_handle points at a company row that this service does not manage.
    """
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity >= 0 AND equity <= 1", name="ck_jobs_equity_fraction"),
    )

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String, nullable=False, index=True)
    salary = Column(Integer, nullable=True)
    equity = Column(Float, nullable=True)
    company_handle = Column(String(25), nullable=False, index=True)

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"

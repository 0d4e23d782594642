"""create job table

Revision ID: 3f2a9c1d7b04
Revises:
Create Date: 2026-10-19 10:12:41.208315
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f2a9c1d7b04"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "job",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("company", sa.String(length=255), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("jobtype", sa.String(length=50), nullable=True),
        sa.Column("salarymin", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("salarymax", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("logo", sa.String(length=500), nullable=True),
        sa.Column("posted", sa.String(length=100), nullable=True),
        sa.Column("experiance", sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_job_id"), "job", ["id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_job_id"), table_name="job")
    op.drop_table("job")

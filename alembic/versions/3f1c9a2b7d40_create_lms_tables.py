"""create lms tables

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(*members: str, name: str) -> sa.Enum:
    return sa.Enum(*members, name=name, native_enum=False, length=20)


def _product_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("image", sa.String(2083), nullable=True),
    )
    op.create_index(f"ix_{name}_id", name, ["id"])


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", _enum("STUDENT", "INSTRUCTOR", "ADMIN", name="userrole"), nullable=False),
        sa.Column("status", _enum("ACTIVE", "INACTIVE", "BLOCKED", name="userstatus"), nullable=False),
        sa.Column("profile_image", sa.String(2083), nullable=True),
        sa.Column("join_date", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("last_active", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_categories_id", "categories", ["id"])

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("instructor_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
        sa.Column("thumbnail", sa.String(2083), nullable=True),
        sa.Column("status", _enum("DRAFT", "PUBLISHED", "ARCHIVED", name="coursestatus"), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_courses_id", "courses", ["id"])
    op.create_index("ix_courses_instructor_id", "courses", ["instructor_id"])
    op.create_index("ix_courses_category_id", "courses", ["category_id"])

    op.create_table(
        "enrollments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("enrollment_date", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("completion_date", sa.DateTime(), nullable=True),
        sa.Column(
            "status",
            _enum("IN_PROGRESS", "COMPLETED", "DROPPED", name="enrollmentstatus"),
            nullable=False,
        ),
    )
    op.create_index("ix_enrollments_id", "enrollments", ["id"])
    op.create_index("ix_enrollments_user_id", "enrollments", ["user_id"])
    op.create_index("ix_enrollments_course_id", "enrollments", ["course_id"])

    op.create_table(
        "videos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("video_link", sa.String(2083), nullable=False),
        sa.Column("notes_link", sa.String(2083), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_videos_id", "videos", ["id"])
    op.create_index("ix_videos_course_id", "videos", ["course_id"])

    for name in ("laptops", "mobiles", "headphones"):
        _product_table(name)


def downgrade() -> None:
    """Downgrade schema."""
    for name in ("headphones", "mobiles", "laptops"):
        op.drop_table(name)
    op.drop_table("videos")
    op.drop_table("enrollments")
    op.drop_table("courses")
    op.drop_table("categories")
    op.drop_table("users")

"""SQLAlchemy metadata definitions for planner tables."""

from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()
sqlite_bigint = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

users = sa.Table(
    "users",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("username", sa.Text(), nullable=False),
    sa.Column("password_hash", sa.Text(), nullable=False),
    sa.UniqueConstraint("username", name="uq_users_username"),
)

tasks = sa.Table(
    "tasks",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
    sa.Column("title", sa.Text(), nullable=False),
    sa.Column("description", sa.Text(), nullable=False),
    sa.Column("due_date", sa.DateTime(timezone=False), nullable=False),
    sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
)

sa.Index("ix_tasks_user_id", tasks.c.user_id)

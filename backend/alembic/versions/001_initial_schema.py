"""Initial schema — users, auto_parts, part_images, buyer_inquiries,
financing_options, financing_applications, and the five enum types.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_type = sa.Enum("buyer", "seller", "financing_provider", name="user_type")
part_category = sa.Enum(
    "engine", "transmission", "brakes", "suspension", "electrical",
    "exhaust", "interior", "exterior", "tires_wheels", "other",
    name="part_category",
)
part_condition = sa.Enum(
    "new", "used_excellent", "used_good", "used_fair", "refurbished",
    name="part_condition",
)
inquiry_status = sa.Enum("pending", "responded", "closed", name="inquiry_status")
application_status = sa.Enum(
    "pending", "approved", "rejected", "withdrawn", name="application_status",
)


def _timestamps(updated: bool = True) -> list[sa.Column]:
    cols = [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]
    if updated:
        cols.append(
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
    return cols


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("user_type", user_type, nullable=False),
        sa.Column("phone", sa.Text, nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("city", sa.Text, nullable=True),
        sa.Column("state", sa.Text, nullable=True),
        sa.Column("zip_code", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "auto_parts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("seller_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", part_category, nullable=False),
        sa.Column("condition", part_condition, nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("make", sa.Text, nullable=False),
        sa.Column("model", sa.Text, nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("part_number", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_auto_parts_seller_id", "auto_parts", ["seller_id"])
    op.create_index(
        "ix_auto_parts_active_created", "auto_parts", ["is_active", "created_at"],
    )

    op.create_table(
        "part_images",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("part_id", sa.Integer, sa.ForeignKey("auto_parts.id"), nullable=False),
        sa.Column("image_url", sa.Text, nullable=False),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(updated=False),
    )
    op.create_index("ix_part_images_part_id", "part_images", ["part_id"])

    op.create_table(
        "buyer_inquiries",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("buyer_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("seller_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("part_id", sa.Integer, sa.ForeignKey("auto_parts.id"), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("status", inquiry_status, nullable=False, server_default="pending"),
        *_timestamps(),
    )
    op.create_index("ix_buyer_inquiries_buyer_id", "buyer_inquiries", ["buyer_id"])
    op.create_index("ix_buyer_inquiries_seller_id", "buyer_inquiries", ["seller_id"])

    op.create_table(
        "financing_options",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("provider_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("min_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("max_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("interest_rate", sa.Numeric(5, 2), nullable=False),
        sa.Column("term_months", sa.Integer, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_financing_options_provider_id", "financing_options", ["provider_id"])

    op.create_table(
        "financing_applications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("buyer_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("provider_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("part_id", sa.Integer, sa.ForeignKey("auto_parts.id"), nullable=False),
        sa.Column(
            "financing_option_id", sa.Integer,
            sa.ForeignKey("financing_options.id"), nullable=False,
        ),
        sa.Column("requested_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", application_status, nullable=False, server_default="pending"),
        sa.Column("application_data", sa.Text, nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_financing_applications_buyer_id", "financing_applications", ["buyer_id"],
    )
    op.create_index(
        "ix_financing_applications_provider_id", "financing_applications", ["provider_id"],
    )


def downgrade() -> None:
    op.drop_table("financing_applications")
    op.drop_table("financing_options")
    op.drop_table("buyer_inquiries")
    op.drop_table("part_images")
    op.drop_table("auto_parts")
    op.drop_table("users")
    bind = op.get_bind()
    for enum in (
        application_status, inquiry_status, part_condition, part_category, user_type,
    ):
        enum.drop(bind, checkfirst=True)

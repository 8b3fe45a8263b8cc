"""Initial schema.

- users, refresh_tokens, user_invites
- somethings, storage_units, boxes, items
- inventory_storage_units, inventory_boxes, inventory_items

Every resource table carries created_on / modified_on / deleted_on; rows are
soft-deleted by setting deleted_on.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c1d9e7a5b20"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list:
    return [
        sa.Column("created_on", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("modified_on", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deleted_on", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    # Security
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False),
        sa.Column("password_hash", sa.String(length=200), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("role", sa.String(length=50), server_default="User", nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "refresh_tokens",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("token", sa.String(length=200), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_revoked", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("created_on", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="fk_refresh_tokens_user_id_users", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_refresh_tokens"),
        sa.UniqueConstraint("token", name="uq_refresh_tokens_token"),
    )
    op.create_index("ix_refresh_tokens_user_id", "refresh_tokens", ["user_id"])

    op.create_table(
        "user_invites",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False),
        sa.Column("token", sa.String(length=200), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_used", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("created_by_user_id", sa.Integer(), nullable=True),
        sa.Column("created_on", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(
            ["created_by_user_id"],
            ["users.id"],
            name="fk_user_invites_created_by_user_id_users",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_user_invites"),
        sa.UniqueConstraint("token", name="uq_user_invites_token"),
    )
    op.create_index("ix_user_invites_created_by_user_id", "user_invites", ["created_by_user_id"])

    # Resource collections
    op.create_table(
        "somethings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id", name="pk_somethings"),
    )

    for prefix in ("", "inventory_"):
        units = f"{prefix}storage_units"
        boxes = f"{prefix}boxes"
        items = f"{prefix}items"

        op.create_table(
            units,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(length=200), nullable=False),
            sa.Column("type", sa.String(length=100), nullable=True),
            *_audit_columns(),
            sa.PrimaryKeyConstraint("id", name=f"pk_{units}"),
        )

        op.create_table(
            boxes,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("number", sa.Integer(), nullable=False),
            sa.Column("storage_unit_id", sa.Integer(), nullable=True),
            *_audit_columns(),
            sa.ForeignKeyConstraint(
                ["storage_unit_id"], [f"{units}.id"], name=f"fk_{boxes}_storage_unit_id_{units}", ondelete="CASCADE"
            ),
            sa.PrimaryKeyConstraint("id", name=f"pk_{boxes}"),
        )
        op.create_index(f"ix_{boxes}_storage_unit_id", boxes, ["storage_unit_id"])

        op.create_table(
            items,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(length=200), nullable=False),
            sa.Column("description", sa.String(length=1000), nullable=True),
            sa.Column("box_id", sa.Integer(), nullable=True),
            sa.Column("storage_unit_id", sa.Integer(), nullable=True),
            *_audit_columns(),
            sa.ForeignKeyConstraint(
                ["box_id"], [f"{boxes}.id"], name=f"fk_{items}_box_id_{boxes}", ondelete="SET NULL"
            ),
            sa.ForeignKeyConstraint(
                ["storage_unit_id"], [f"{units}.id"], name=f"fk_{items}_storage_unit_id_{units}", ondelete="CASCADE"
            ),
            sa.PrimaryKeyConstraint("id", name=f"pk_{items}"),
        )
        op.create_index(f"ix_{items}_box_id", items, ["box_id"])
        op.create_index(f"ix_{items}_storage_unit_id", items, ["storage_unit_id"])


def downgrade() -> None:
    # Drop tables in reverse dependency order
    for prefix in ("inventory_", ""):
        op.drop_index(f"ix_{prefix}items_storage_unit_id", table_name=f"{prefix}items")
        op.drop_index(f"ix_{prefix}items_box_id", table_name=f"{prefix}items")
        op.drop_table(f"{prefix}items")
        op.drop_index(f"ix_{prefix}boxes_storage_unit_id", table_name=f"{prefix}boxes")
        op.drop_table(f"{prefix}boxes")
        op.drop_table(f"{prefix}storage_units")

    op.drop_table("somethings")
    op.drop_index("ix_user_invites_created_by_user_id", table_name="user_invites")
    op.drop_table("user_invites")
    op.drop_index("ix_refresh_tokens_user_id", table_name="refresh_tokens")
    op.drop_table("refresh_tokens")
    op.drop_table("users")

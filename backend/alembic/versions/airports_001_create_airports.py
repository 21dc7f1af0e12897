"""Create airports table

Revision ID: airports_001
Revises:
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

revision = "airports_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "airports",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("iata_code", sa.String(3), nullable=False),
        sa.Column("icao_code", sa.String(4), nullable=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("city_name", sa.String(100), nullable=True),
        sa.Column("country_code", sa.String(2), nullable=False),
        sa.Column("country_name", sa.String(100), nullable=True),
        sa.Column("time_zone", sa.String(64), nullable=True),
        sa.Column("latitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("longitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_airports_iata_code", "airports", ["iata_code"], unique=True)
    op.create_index("ix_airports_city_name", "airports", ["city_name"])


def downgrade() -> None:
    op.drop_index("ix_airports_city_name", table_name="airports")
    op.drop_index("ix_airports_iata_code", table_name="airports")
    op.drop_table("airports")

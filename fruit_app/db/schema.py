# fruit_app/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, String, Numeric, CheckConstraint
)

metadata = MetaData()

fruit = Table(
    "fruit",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("color", String(50), nullable=True),
    Column("price", Numeric(10, 2), nullable=True),
    CheckConstraint("price IS NULL OR price >= 0", name="ck_fruit_price_nonneg"),
)

# app/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, String

metadata = MetaData()

# One document per row; `id` is the store-assigned identifier.
users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String, nullable=False),
    Column("last_name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("gender", String, nullable=False),
    Column("city", String, nullable=False),
    Column("ip_address", String, nullable=False),
)
"""
Alembic environment for the HackHub schema.

The target URL is HACKHUB_DB_URL (environment or .env) when set, else
sqlalchemy.url from alembic.ini. SQLite connections get the same
foreign key pragma and Unicode lower() as the application, and run in
batch mode so ALTERs in later revisions work there too.
"""

import os
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import engine_from_config, event, pool

load_dotenv(Path(__file__).resolve().parents[3] / ".env")

from hackhub.db.database import set_sqlite_pragma  # noqa: E402
from hackhub.models import Base  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

if os.environ.get("HACKHUB_DB_URL"):
    config.set_main_option("sqlalchemy.url", os.environ["HACKHUB_DB_URL"])

target_metadata = Base.metadata

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def run_migrations_offline() -> None:
    """Emit SQL for the configured URL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    event.listen(connectable, "connect", set_sqlite_pragma)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

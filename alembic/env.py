"""Alembic environment for the customers/addresses schema.

DATABASE_URL wins over alembic.ini, and is normalised the same way Settings does.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from app.config import Settings
from app.db.base import Base
import app.models  # noqa: F401  registers Customer and Address on Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _database_url() -> str:
    ini_url = config.get_main_option("sqlalchemy.url")
    if os.environ.get("DATABASE_URL") or not ini_url:
        return Settings().database_url
    return Settings(database_url=ini_url).database_url


def _configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(lambda conn: _configure(connection=conn))
    await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_migrate_online())

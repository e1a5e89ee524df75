from logging.config import fileConfig
import os

from alembic import context
from sqlalchemy import create_engine, pool

from dotenv import load_dotenv
load_dotenv()

from app.db.base import Base
import app.models  

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

db_url = os.getenv("DATABASE_URL")
if not db_url:
    raise RuntimeError("DATABASE_URL is not set")

if db_url.startswith("postgresql") and "sslmode=" not in db_url and os.getenv("DB_SSLMODE"):
    sep = "&" if "?" in db_url else "?"
    db_url = f"{db_url}{sep}sslmode={os.getenv('DB_SSLMODE')}"


def run_migrations_offline() -> None:
    context.configure(
        url=db_url, 
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(
        db_url,  
        poolclass=pool.NullPool,
        pool_pre_ping=True,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

from alembic import context
from sqlalchemy import create_engine, pool
from app.core_settings import get_settings
from app.domain.models import Base

config = context.config
target_metadata = Base.metadata

def _database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or get_settings().database_url

def _configure(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        # SQLite cannot ALTER constraints in place
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_offline():
    context.configure(url=_database_url(), target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    # The service passes its own connection in; the CLI builds one from settings
    connection = config.attributes.get("connection")
    if connection is not None:
        _configure(connection)
        return

    connectable = create_engine(_database_url(), poolclass=pool.NullPool)
    with connectable.connect() as connection:
        _configure(connection)
        connection.commit()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

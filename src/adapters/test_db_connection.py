"""Simple CLI to validate the storefront database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the storefront database.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    store_engine = adapter.get_store_engine()
    logger.info(f"Store DB: {store_engine.url}")

    with store_engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Connection is working.")


if __name__ == "__main__":
    main()

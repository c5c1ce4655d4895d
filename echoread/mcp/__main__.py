import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from httpx import ASGITransport, AsyncClient

from echoread.app import create_app
from echoread.config import DATABASE_URL, DB_PATH
from echoread.mcp.client import EchoreadClient
from echoread.mcp.server import create_mcp_server

logger = logging.getLogger("echoread.mcp")

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def run_migrations(database_url: str = DATABASE_URL) -> None:
    """Bring the database up to the latest revision."""
    cfg = Config(str(ALEMBIC_INI))
    cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
    cfg.attributes["database_url"] = database_url
    # Keep the app's logging; alembic.ini would otherwise replace it
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head")
    logger.info("Database at %s is up to date", database_url)


def main():
    # stdout carries the MCP stream, so logs go to stderr via create_app()
    app = create_app()
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    run_migrations()

    transport = ASGITransport(app=app)
    http = AsyncClient(transport=transport, base_url="http://localhost")
    mcp = create_mcp_server(EchoreadClient(http))
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("BUILTIN_CRYPTO_LOG_LEVEL", "WARNING").upper()
STRICT_KEYMAT_NAME = os.getenv("BUILTIN_CRYPTO_STRICT_KEYMAT_NAME", "1").lower() not in (
    "0",
    "false",
    "no",
    "off",
)


def configure_logging(level: str = LOG_LEVEL) -> None:
    # Sólo la CLI configura handlers; la librería se limita a emitir registros.
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

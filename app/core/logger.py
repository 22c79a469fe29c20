import re
import sys

from loguru import logger

SENSITIVE_KEYS = re.compile(r"(password|token|secret|session_id)", re.IGNORECASE)
EMAIL_KEYS = re.compile(r"email", re.IGNORECASE)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def mask_email(email: str) -> str:
    """Keep the first character of the local part and the domain: ``a***@example.com``."""
    local, sep, domain = email.partition("@")
    if not sep or not local:
        return "***"
    return f"{local[0]}***@{domain}"


def sanitize_value(key: str, value: object) -> object:
    """Redact credentials and mask addresses before they reach a log sink."""
    if SENSITIVE_KEYS.search(key):
        return "***REDACTED***"
    if EMAIL_KEYS.search(key) and isinstance(value, str):
        return mask_email(value)
    if isinstance(value, dict):
        return sanitize_dict(value)
    if isinstance(value, (list, tuple)):
        return [sanitize_value(key, item) for item in value]
    return value


def sanitize_dict(data: dict) -> dict:
    return {k: sanitize_value(str(k), v) for k, v in data.items()}


def setup_logger(debug: bool = False, log_file: str | None = None) -> None:
    """Console sink always; a rotated, compressed file sink when ``log_file`` is set."""
    logger.remove()

    log_level = "DEBUG" if debug else "INFO"
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        logger.add(
            log_file,
            level=log_level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="30 days",
            compression="gz",
            enqueue=True,
        )

import sys

from loguru import logger


def setup_logging(debug: bool = False) -> None:
    """Configure Loguru once; library modules only emit, never add sinks."""
    logger.remove()  # drop default handler(s) to avoid duplicates on re-run
    logger.add(
        sys.stdout,
        level="DEBUG" if debug else "INFO",
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )

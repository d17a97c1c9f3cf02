import logging
import sys


FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level="WARNING", format_style="simple"):
    """
    configure the root logger for the whole app, returns the numeric level;
    unknown level names fall back to WARNING
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    log_format = FORMATS.get(format_style, FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    return numeric_level

"""Logger factory shared by the API, the LLM gateway and the summary pipeline."""

import logging
from typing import Optional

from uvicorn.logging import DefaultFormatter

from configs import settings

ROOT_LOGGER_NAME = "reqbot"
FORMAT = "%(levelprefix)s %(asctime)s [%(threadName)s] [%(name)s] %(message)s"


def get_logger(component: str, level: Optional[str] = None) -> logging.Logger:
    """Return the ``reqbot.<component>`` logger, attaching a console handler once.

    Handlers live on the ``reqbot`` root so child loggers created for each
    component share a single formatter instead of stacking duplicates. The
    root level comes from ``LOG_LEVEL`` when the handler is attached and only
    changes afterwards when ``level`` is passed explicitly.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(DefaultFormatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel((level or settings.LOG_LEVEL).upper())
    elif level:
        root.setLevel(level.upper())

    if component.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(component)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")

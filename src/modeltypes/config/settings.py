"""Package settings read from ``MODELTYPES_*`` environment variables.

Keyword arguments passed by the embedding application win over the
environment, which wins over the code defaults.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings

from modeltypes.config.logging import configure_logging
from modeltypes.domain import dates


class ModelTypesSettings(BaseSettings):
    """Settings for the modeltypes package.

    Attributes:
        utc_clock: ``today()`` / ``now()`` read UTC instead of local time.
        verbose: DEBUG logging for the ``modeltypes`` logger.
        log_json: JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MODELTYPES_",
    }

    utc_clock: bool = False
    verbose: bool = False
    log_json: bool = False


def configure(settings: ModelTypesSettings | None = None) -> ModelTypesSettings:
    """Apply *settings* (read from the environment when omitted).

    Switches the wall clock behind :func:`~modeltypes.domain.dates.today`
    and :func:`~modeltypes.domain.dates.now`, and installs the package log
    handler.
    """
    if settings is None:
        settings = ModelTypesSettings()
    dates.use_utc_clock(settings.utc_clock)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    return settings

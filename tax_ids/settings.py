"""Default settings for tax id verification.

The uppercase names in this module are the defaults. They can be overridden by
environment variables prefixed with ``TAX_IDS_`` (``TAX_IDS_VIES_URL=...``) and
by explicit values passed to :func:`get_settings`.
"""

import os
from collections.abc import Mapping
from functools import cache
from typing import Any

from scrapy.settings import Settings

BFS_URL = "https://www.uid-wse-a.admin.ch/V5.0/PublicServices.svc"
VIES_URL = "http://ec.europa.eu/taxation_customs/vies/services/checkVatService"
HMRC_URL = "https://api.service.hmrc.gov.uk/organisations/vat/check-vat-number/lookup"
BRREG_URL = "https://data.brreg.no/enhetsregisteret/api/enheter"

# Seconds, same default as scrapy's downloader
DOWNLOAD_TIMEOUT = 180
USER_AGENT = "tax-ids (+https://pypi.org/project/tax-ids/)"

TAX_ID_TYPES = ["eu_vat", "gb_vat", "ch_vat", "no_vat"]

LOG_LEVEL = "INFO"
LOG_FILE = None

ENVVAR_PREFIX = "TAX_IDS_"


def _build_settings(values: Mapping[str, Any] | None = None) -> Settings:
    settings = Settings()
    settings.setmodule(__name__, priority="default")
    for name, value in os.environ.items():
        if name.startswith(ENVVAR_PREFIX):
            settings.set(name.removeprefix(ENVVAR_PREFIX), value, priority="project")
    if values:
        settings.setdict(dict(values), priority="cmdline")
    settings.freeze()
    return settings


@cache
def _default_settings() -> Settings:
    return _build_settings()


def get_settings(values: Mapping[str, Any] | None = None) -> Settings:
    """Return frozen settings for the verifiers and the syntax registry.

    Args:
        values: Explicit overrides, applied on top of the environment.

    Returns:
        A frozen `scrapy.settings.Settings`. Without overrides the same
        instance is shared by the whole process.

    Examples:
        >>> get_settings({"DOWNLOAD_TIMEOUT": 5}).getfloat("DOWNLOAD_TIMEOUT")
        5.0
        >>> get_settings({"TAX_ID_TYPES": "eu_vat,no_vat"}).getlist("TAX_ID_TYPES")
        ['eu_vat', 'no_vat']

    """
    if not values:
        return _default_settings()
    return _build_settings(values)

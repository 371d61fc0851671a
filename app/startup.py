"""Startup validation and configuration checks."""

import logging
from pathlib import Path

from featurefence import LintGateway, TargetResolver, build_default_registry
from featurefence.compat_index import FEATURES_FILE, load_default_index
from featurefence.runtimes import RUNTIMES_FILE, load_default_catalog

from .config import get_data_dir, get_dead_after_months, get_max_body_bytes

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Warn about a data directory override that is missing files."""
    data_dir = get_data_dir()
    if not data_dir:
        return
    for name in (RUNTIMES_FILE, FEATURES_FILE):
        if not (Path(data_dir) / name).exists():
            logger.warning("FEATUREFENCE_DATA_DIR is set but %s is missing in %s", name, data_dir)


def build_gateway() -> LintGateway:
    """Load the catalog and index once and wire the gateway around them.

    Raises:
        DataLoadError: If a data file is missing or malformed
    """
    data_dir = get_data_dir()
    catalog = load_default_catalog(data_dir)
    index = load_default_index(data_dir)
    gateway = LintGateway(
        registry=build_default_registry(index),
        resolver=TargetResolver(catalog, dead_after_months=get_dead_after_months()),
        max_code_length=get_max_body_bytes(),
    )
    logger.info(
        "Gateway ready: languages=%s, runtimes %s, features %s",
        gateway.registry.supported_languages(), catalog.version, index.version,
    )
    return gateway

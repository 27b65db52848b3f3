from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

DEFAULT_CONFIG_PATH = Path('data/config/registry_config.yml')


def read_log_level(config_path: Path, default: int = logging.WARNING) -> int:
    """Return the level named by `log_level` in the YAML file at `config_path`.

    A missing file, a missing key or a parse error yields `default`.
    """
    if not config_path.exists():
        return default
    try:
        with config_path.open('r', encoding='utf-8') as _f:
            _cfg = yaml.safe_load(_f) or {}
        _lvl = _cfg.get('log_level')
        if not _lvl:
            return default
        level = getattr(logging, str(_lvl).upper())
        return level if isinstance(level, int) else default
    except (OSError, AttributeError, yaml.YAMLError):
        return default


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for an application embedding the container.

    Establishes an early NOTSET basic config so the config file can be read,
    then reconfigures the root logger to the level from `log_level`.
    Returns a module logger for the caller.
    """
    # Minimal early config so other imports can emit without error
    logging.basicConfig(level=logging.NOTSET, format='%(asctime)s INFO %(message)s')

    level = read_log_level(config_path or DEFAULT_CONFIG_PATH)

    logging.log(100, f'[registry]: Log level set to: {logging.getLevelName(level)}')

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.info("Logging configured for registry_lib")

    return logger

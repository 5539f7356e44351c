"""Solver configuration composed by Hydra from ``conf/config.yaml``.

The loaded configuration is also kept as a process-wide instance so that
``create_astar_searcher`` and the CLI see the same settings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf, open_dict

from .validators import validate_config

logger = logging.getLogger(__name__)

_global_config: Optional[DictConfig] = None

# Mirrors conf/config.yaml
DEFAULTS: Dict[str, Any] = {
    'puzzles': {
        'data_dir': 'data',
        'input_template': 'day{day:02d}.txt',
    },
    'search': {
        'astar': {
            'skip_stale': False,
            'log_progress_every': 0,
        },
    },
    'logging': {
        'level': 'WARNING',
    },
}

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "conf"


class ConfigManager:
    """Loads and edits the configuration found in one conf directory.

    Args:
        config_dir: Directory holding ``config.yaml``; the repository's
            ``conf/`` when omitted

    Raises:
        FileNotFoundError: If the directory does not exist
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose ``config_name`` with Hydra ``key=value`` overrides.

        The result also becomes the global configuration.

        Raises:
            ConfigValidationError: If ``validate`` is set and a value is invalid
        """
        GlobalHydra.instance().clear()

        with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
            cfg = compose(config_name=config_name, overrides=overrides or [])

        if validate:
            validate_config(cfg)

        self.config = cfg
        _set_global_config(cfg)
        logger.info(f"Loaded {config_name}.yaml from {self.config_dir}"
                    + (f" with overrides {overrides}" if overrides else ""))
        return cfg

    def get_config(self) -> Optional[DictConfig]:
        return self.config

    def _loaded(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Value at dotted ``key`` (e.g. ``search.astar.skip_stale``)."""
        return OmegaConf.select(self._loaded(), key, default=default)

    def set_parameter(self, key: str, value: Any) -> None:
        config = self._loaded()
        with open_dict(config):
            OmegaConf.update(config, key, value)
        logger.debug(f"Parameter set: {key} = {value}")

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Apply several dotted-key assignments at once."""
        for key, value in updates.items():
            self.set_parameter(key, value)

    def save_config(self, output_path: Union[str, Path]) -> None:
        """Write the current configuration as YAML, creating parent directories."""
        config = self._loaded()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(config, output_path)
        logger.info(f"Configuration saved to: {output_path}")


def _set_global_config(cfg: Optional[DictConfig]) -> None:
    global _global_config
    _global_config = cfg


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load ``config_dir`` (default: the repository's ``conf/``) globally."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def default_config(overrides: Optional[List[str]] = None, validate: bool = True) -> DictConfig:
    """Built-in defaults for when no configuration directory is available.

    Overrides use the same ``key=value`` dotlist syntax as Hydra. The result
    becomes the global configuration.
    """
    cfg = OmegaConf.create(DEFAULTS)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    if validate:
        validate_config(cfg)
    _set_global_config(cfg)
    logger.info("Using built-in default configuration")
    return cfg


def get_config() -> Optional[DictConfig]:
    """The global configuration, or None before anything was loaded."""
    return _global_config


def reset_config() -> None:
    _set_global_config(None)


def get_parameter(key: str, default: Any = None) -> Any:
    """Value at dotted ``key`` in the global configuration, else ``default``."""
    config = get_config()
    if config is None:
        return default
    return OmegaConf.select(config, key, default=default)

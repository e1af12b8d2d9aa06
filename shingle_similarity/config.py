import logging

from hydra import compose, initialize
from omegaconf import OmegaConf

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Composes the package's Hydra config tree (configs/config.yaml).

    Nothing is read from disk until the first access to cfg, so importing
    the package never touches Hydra's global state.

    Usage:
        settings.cfg.metric.k                            # composed on first use
        settings.reload(["metric=sorensen_dice"])        # switch the default metric
        settings.compose_config(["metric.k=2"])          # one-off, settings.cfg unchanged
    """
    def __init__(self, config_name="config", config_path="./configs", overrides=None, version_base="1.3"):
        self.config_name = config_name
        self.config_path = config_path
        self.overrides = overrides or []
        self.version_base = version_base
        self._cfg = None

    @property
    def is_loaded(self) -> bool:
        return self._cfg is not None

    def compose_config(self, overrides=None):
        """Compose metric/batch settings with overrides, without storing them"""
        with initialize(version_base=self.version_base, config_path=self.config_path):
            return compose(config_name=self.config_name, overrides=list(overrides or self.overrides))

    def load(self, overrides=None, verbose=False):
        """Compose and keep the settings returned by cfg from now on"""
        self._cfg = self.compose_config(overrides)
        if verbose:
            logger.info("Loaded config:\n%s", OmegaConf.to_yaml(self._cfg))
        return self._cfg

    def reload(self, overrides=None, verbose=False):
        """Replace the stored settings, e.g. to change the default metric"""
        return self.load(overrides=overrides, verbose=verbose)

    @property
    def cfg(self):
        """Stored settings, composed with the default overrides on first access"""
        if self._cfg is None:
            return self.load()
        return self._cfg


settings = ConfigManager()

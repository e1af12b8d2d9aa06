"""
Build metrics from the Hydra config.
"""
import logging

from hydra.errors import InstantiationException
from hydra.utils import instantiate as hydra_instantiate

from shingle_similarity.config import settings
from shingle_similarity.errors import ShingleSimilarityError
from shingle_similarity.metrics.base import ShingleBased

logger = logging.getLogger(__name__)


def build_metric(name: str | None = None, **overrides) -> ShingleBased:
    """
    Instantiate the configured metric.

    Args:
        name: Config group option under configs/metric (e.g. "sorensen_dice").
              Uses the loaded config's metric when omitted.
        **overrides: Field overrides, e.g. k=2 becomes "metric.k=2"

    Raises:
        ConfigurationError: The config holds an invalid k or on_empty

    Example:
        build_metric()                          # QGram(k=3)
        build_metric("sorensen_dice", k=2)
    """
    hydra_overrides = [f"metric={name}"] if name else []
    hydra_overrides += [f"metric.{key}={value}" for key, value in overrides.items()]

    cfg = settings.compose_config(hydra_overrides) if hydra_overrides else settings.cfg
    try:
        metric = hydra_instantiate(cfg.metric)
    except InstantiationException as e:
        # Hydra wraps whatever the target raised
        if isinstance(e.__cause__, ShingleSimilarityError):
            raise e.__cause__ from None
        raise
    logger.debug(f"Built {metric!r} from config (overrides={hydra_overrides})")
    return metric

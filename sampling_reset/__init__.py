"""sampling-reset: answer tracing sampling polls with a fixed default strategy."""

from sampling_reset.config import ResetConfig, load_config
from sampling_reset.errors import BindError, ConfigError, SamplingResetError
from sampling_reset.server import Responder
from sampling_reset.strategy import DEFAULT_STRATEGY, SamplingStrategyResponse, StrategyType

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BindError",
    "ConfigError",
    "DEFAULT_STRATEGY",
    "ResetConfig",
    "Responder",
    "SamplingResetError",
    "SamplingStrategyResponse",
    "StrategyType",
    "load_config",
]

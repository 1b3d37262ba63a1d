from .config import (
    ConfigError,
    CosmosConfig,
    DatabaseConfig,
    OutputConfig,
    load_config,
)
from .rng import make_rng, random_token

from trendsage.config.history import HistoryConfig
from trendsage.config.logging import LoggingConfig

DEFAULT_CONFIG = {
    "history": HistoryConfig.default().model_dump(),
    "logging": LoggingConfig.default().model_dump(by_alias=True),
}

import os
import yaml
from dataclasses import dataclass
from typing import Optional

@dataclass
class DatabaseConfig:
    path: str = "tracker.db"
    journal_mode: str = "WAL"
    synchronous: str = "NORMAL"

@dataclass
class LoggingConfig:
    debug: bool = False
    log_file: str = "tracker_debug.log"

@dataclass
class TrackerConfig:
    database: DatabaseConfig
    logging: LoggingConfig

def load_config(config_path: Optional[str] = None) -> TrackerConfig:
    """Load configuration from file or use defaults."""
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        database_config = DatabaseConfig(**(config_data.get('database') or {}))
        logging_config = LoggingConfig(**(config_data.get('logging') or {}))
    else:
        database_config = DatabaseConfig()
        logging_config = LoggingConfig()

    return TrackerConfig(
        database=database_config,
        logging=logging_config,
    )

# src/file_seeker/logging_config.py
import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

import coloredlogs  # needed so dictConfig can build coloredlogs.ColoredFormatter
import yaml

config_logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'logging_config.yaml'


def setup_logging(config_path: Optional[Path] = None, verbose: bool = False) -> None:
    """Loads the YAML logging configuration and applies it with dictConfig.

    A missing, empty or broken file falls back to logging.basicConfig.
    verbose raises the file_seeker logger to DEBUG after configuration.
    """
    config_path = config_path or DEFAULT_CONFIG_PATH

    try:
        if config_path.is_file():
            config_logger.debug(f"Found logging configuration file: {config_path}")
            with open(config_path, 'rt', encoding='utf-8') as f:
                config = yaml.safe_load(f.read())

            if config:
                logging.config.dictConfig(config)
                logging.getLogger("file_seeker").debug(f"Logging configured from {config_path}")
            else:
                print(f"Warning: Logging configuration file {config_path} is empty. Using basicConfig.", file=sys.stderr)
                _basic_fallback()
        else:
            print(f"Warning: Logging configuration file not found at {config_path}. Using basicConfig.", file=sys.stderr)
            _basic_fallback()

    except yaml.YAMLError as yaml_e:
        print(f"Error parsing logging configuration file {config_path}: {yaml_e}", file=sys.stderr)
        _basic_fallback()
        logging.getLogger("file_seeker").error(f"Failed to parse logging config YAML: {yaml_e}")
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # dictConfig reports bad schemas with these
        print(f"Error loading logging configuration from {config_path}: {e}", file=sys.stderr)
        _basic_fallback()
        logging.getLogger("file_seeker").error(f"Failed to load logging config: {e}", exc_info=True)

    if verbose:
        logging.getLogger("file_seeker").setLevel(logging.DEBUG)


def _basic_fallback() -> None:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s:%(name)s:%(message)s')
    try:
        coloredlogs.install(level='INFO')
    except Exception as install_e:
        print(f"Warning: coloredlogs.install() failed: {install_e}", file=sys.stderr)

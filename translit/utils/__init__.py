# translit/utils/__init__.py
from .config import Config, get_config, set_config
from .logger import setup_logging, get_logger

from .logger import get_logger
from . import config_loader

__all__ = ["get_logger", "config_loader"]

__all__ = [
    "Logger", "LoggerFunc", "Result", "OK",
    "StdLogger", "Pair", "Group",
    "init", "setup_logging", "get_logger", "set_logger",
    "prefix_drop", "substitute", "skip_pair",
]
__version__ = "0.1.0"

from .logging import Logger, LoggerFunc, Result, OK
from .flatten import Pair, Group
from .render import prefix_drop, substitute, skip_pair
from .stdlog import StdLogger
from .bootstrap import init, setup_logging, get_logger, set_logger

"""Read and write variables in the process environment."""
from loguru import logger

from .schemas.result import EnvResult, ErrorResult, OkResult, ResultTag, parse_env_result
from .utils.env import get_env, get_env_var, set_env

# Library code stays quiet until an entry point calls configure_logging()
logger.disable("envaccess")

__all__ = [
    "EnvResult",
    "ErrorResult",
    "OkResult",
    "ResultTag",
    "get_env",
    "get_env_var",
    "parse_env_result",
    "set_env",
]

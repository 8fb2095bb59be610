#!filepath: clockspeed/utils/logger.py
import os
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable

_LOGGER_CONFIGURED = False


class Logging:
    """
    Project logger (loguru)
    ---------------------------------------
    - daily file rotation
    - retention window
    - catch / timing decorator for IO steps
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: str = "logs",
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        Replace every loguru sink with the project file sink.
        """
        global _LOGGER_CONFIGURED

        logger.remove()

        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

        if not _LOGGER_CONFIGURED:
            logger.info("\n-----------Logger initialized successfully.-----------")
        _LOGGER_CONFIGURED = True

    # ---------- basic interface ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        print(msg)
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        print(msg)
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(self, msg: str = "Exception occurred", log_time: bool = True) -> Callable:
        """
        Log the traceback of any exception (then re-raise) and the call duration.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    self.exception(f"[ERROR] {func.__qualname__}: {msg}")
                    raise

                if log_time:
                    self.debug(f"[TIME] {func.__qualname__} took {perf_counter() - start:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(log_cfg) -> Logging:
    """
    Rebuild the global `logs` sinks from a LogConfig.
    """
    global logs
    logs = Logging(
        log_dir=log_cfg.dir,
        rotation=log_cfg.rotation,
        retention=log_cfg.retention,
        log_level=log_cfg.level,
    )
    return logs


# default global logs (rebuilt by init_logging)
logs = Logging()

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service_name: str, log_dir: Optional[Union[str, Path]] = None,
                  level: int = logging.INFO) -> logging.Logger:
    """
    Configure logging for the given service.

    Layout:
    <log_dir>/
        {service_name}.log  - this service only
        all.log             - every logger, attached to the root logger once

    :param service_name: Logger name, also used as the log file name
    :param log_dir: Directory for log files, 'logs' by default
    :param level: Level for the service logger and its handlers
    :return: Logger for the service
    """
    logs_dir = Path(log_dir or 'logs')
    logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

    service_log_path = logs_dir / f'{service_name}.log'
    all_log_path = logs_dir / 'all.log'

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(service_log_path),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)
    service_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Re-running setup replaces the handlers instead of stacking them
    for handler in logger.handlers:
        handler.close()
    logger.handlers = [service_handler, console_handler]

    root_logger = logging.getLogger()
    all_handler_exists = any(
        isinstance(handler, RotatingFileHandler)
        and handler.baseFilename == os.path.abspath(all_log_path)
        for handler in root_logger.handlers
    )
    if not all_handler_exists:
        all_handler = RotatingFileHandler(
            str(all_log_path),
            maxBytes=20*1024*1024,  # 20 MB, shared by all services
            backupCount=5,
            encoding='utf-8'
        )
        all_handler.setFormatter(formatter)
        all_handler.setLevel(level)
        root_logger.addHandler(all_handler)
        root_logger.setLevel(level)

    return logger

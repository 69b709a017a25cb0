import logging
import os

LOGGER_NAME = "byte_entropy"

def init_logging(log_file: str, save_file: bool, level=logging.WARNING):
    """
    Initializes the logging system for the tool.
    Call it once from the entry point; modules log through get_logger().

    Args:
        log_file (str): The name of the log file.
        save_file (bool): If True, also writes logs to log_file.
        level (int | str): The minimum logging level to record.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    if save_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # stderr, so results on stdout stay clean
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    logger.debug(f"Logging system initialized. Log file: {os.path.abspath(log_file)}")
    return logger

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")

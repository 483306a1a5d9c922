"""Logging functions for boxplot rendering runs"""

import datetime
import logging
import os
import uuid


def out_file_core():
    """Creates an output file name concatenating a formatted date and uuid, but without an extension.

    Returns:
        string: A string to be used in a file name.
    """
    date = str(datetime.datetime.now().strftime("%Y%d%m_%H%M%S"))
    return f"log-{date}-{str(uuid.uuid4())}"


def construct_logger(name, save_dir, log_to_terminal=False):
    """Constructs a logger saving its output as a text file in ``save_dir``.

    The file handler records DEBUG messages and upwards, including the summaries computed for every
    boxplot; the optional terminal handler records INFO and upwards.

    Args:
        name (str): The name of the logger, typically the name of the run being logged.
        save_dir (str): The directory where the log file will be saved. Created if missing.
        log_to_terminal (bool, optional): Whether to also log messages to the terminal. Defaults to False.

    Returns:
        logging.Logger: The constructed logger.
    """
    os.makedirs(save_dir, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    fh = logging.FileHandler(os.path.join(save_dir, out_file_core() + ".txt"), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    if log_to_terminal:
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    return logger

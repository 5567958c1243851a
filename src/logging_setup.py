import logging
import os
from datetime import datetime


def configure_logging(level=logging.INFO, logs_dir=None):
    """
    Log to a dated file under logs/ and to the console.
    """
    logs_dir = logs_dir or os.path.join(os.getcwd(), 'logs')
    os.makedirs(logs_dir, exist_ok=True)

    # Create log file with today's date
    log_filename = os.path.join(logs_dir, f'geotools_{datetime.now().strftime("%Y%m%d")}.log')

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_filename),
            logging.StreamHandler()
        ]
    )
    return log_filename

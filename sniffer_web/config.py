"""Configuration for the design-sniffer viewer"""

import os

from sniffer_core.config import config
from sniffer_core.result_store import RESULT_FILENAME

# Primary artifact written by the analyzer
DATA_PATH = config.public_dir / RESULT_FILENAME
ARCHIVE_DIR = config.archive_dir

HOST = os.getenv('SNIFFER_WEB_HOST', '127.0.0.1')
PORT = int(os.getenv('SNIFFER_WEB_PORT', '5000'))
DEBUG = os.getenv('SNIFFER_DEBUG', 'false').lower() == 'true'

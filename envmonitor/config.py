# file: envmonitor/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# Local path or http(s) URL of the CSV file
DATA_SOURCE = os.getenv("DASHBOARD_DATA_SOURCE", "data.csv")
FETCH_TIMEOUT = float(os.getenv("DASHBOARD_FETCH_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("DASHBOARD_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

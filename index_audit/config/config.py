import os
from dotenv import load_dotenv

load_dotenv()

# MongoDB configuration
# MONGODB_URI = 'mongodb://localhost:27017/?replicaSet=rs0'
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "myapp")
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

# Index policy
DISALLOWED_INDEX_TYPE = "text"
PROTECTED_INDEX_NAME = "_id_"

# Server error code returned by dropIndexes for an unknown index
INDEX_NOT_FOUND_CODE = 27

# Logging configuration
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

# Report
REPORT_WIDTH = 60

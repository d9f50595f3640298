import os
from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("HANGUL_NORMALIZER_LOG_LEVEL", "WARNING").upper()

# Encoding used for named input/output files
ENCODING = os.getenv("HANGUL_NORMALIZER_ENCODING", "utf-8")

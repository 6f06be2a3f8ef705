import os
from dotenv import load_dotenv
load_dotenv()
# ---- Ontology explorer ----
ONTOLOGY_BASE_URL = os.environ.get("ONTOLOGY_BASE_URL", "https://explorer.ont.io/api/v1/explorer")

# ---- Aion dashboard ----
AION_BASE_URL = os.environ.get("AION_BASE_URL", "https://mainnet-api.aion.network/aion/dashboard")

# ---- HTTP ----
TX_PER_PAGE = int(os.environ.get("TX_PER_PAGE", "25"))
HTTP_TIMEOUT_SEC = int(os.environ.get("HTTP_TIMEOUT_SEC", "15"))
HTTP_MAX_RETRIES = int(os.environ.get("HTTP_MAX_RETRIES", "3"))
HTTP_REQUESTS_PER_SEC = float(os.environ.get("HTTP_REQUESTS_PER_SEC", "2.0"))

# Max parallel address fetches per chain
FETCH_CONCURRENCY = int(os.environ.get("FETCH_CONCURRENCY", "4"))

# ---- Logging ----
LOG_LEVEL = os.environ.get("TXATLAS_LOG_LEVEL", "INFO")

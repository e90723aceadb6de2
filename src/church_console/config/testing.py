SECRET_KEY = "test-secret"

API_BASE_URL = "http://church-api.test"
API_TIMEOUT = 5.0

FILTER_DEBOUNCE_MS = 0

CHURCH_URL = "https://church.test/"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

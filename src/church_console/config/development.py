import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Church API (backend) the console talks to
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

# Quiet period before a filter change reloads the list
FILTER_DEBOUNCE_MS = int(os.getenv("FILTER_DEBOUNCE_MS", "500"))

# Encoded in the public QR code
CHURCH_URL = os.getenv("CHURCH_URL", "https://www.uonsdamain.org/")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

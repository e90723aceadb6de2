import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

FILTER_DEBOUNCE_MS = int(os.getenv("FILTER_DEBOUNCE_MS", "500"))

CHURCH_URL = os.getenv("CHURCH_URL", "https://www.uonsdamain.org/")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

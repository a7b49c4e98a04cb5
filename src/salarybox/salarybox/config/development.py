import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Simulated API latency (seconds) awaited by every data-service call
SIMULATED_LATENCY = float(os.getenv("SIMULATED_LATENCY", "0.3"))

# Seed of the mock attendance generator; same seed -> same calendars
RANDOM_SEED = int(os.getenv("RANDOM_SEED", "42"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SIMULATED_LATENCY = float(os.getenv("SIMULATED_LATENCY", "0.3"))
RANDOM_SEED = int(os.getenv("RANDOM_SEED", "42"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

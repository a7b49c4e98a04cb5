SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SIMULATED_LATENCY = 0.0
RANDOM_SEED = 1234

LOG_LEVEL = "WARNING"

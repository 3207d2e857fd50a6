"""
Configuration settings for ngrok-docker
"""
import os

# Container Configuration
CONTAINER_NAME = os.getenv("NGROK_CONTAINER_NAME", "ngrok")
IMAGE = os.getenv("NGROK_IMAGE", "wernight/ngrok")
DOCKER_BIN = os.getenv("DOCKER_BIN", "docker")

# Tunnel Configuration
DEFAULT_PORT = int(os.getenv("NGROK_DEFAULT_PORT", "8080"))

# Status API Configuration
# Inside the container the inspection API listens on port 4040. If the port is
# published to the host, set NGROK_API_URL to query it directly instead of
# going through `docker exec`.
INTERNAL_API_ADDRESS = "localhost:4040"
TUNNELS_ENDPOINT = "/api/tunnels"
API_URL = os.getenv("NGROK_API_URL")
API_TIMEOUT = int(os.getenv("NGROK_API_TIMEOUT", "5"))

# Polling Configuration
MAX_RETRIES = int(os.getenv("NGROK_MAX_RETRIES", "30"))
RETRY_DELAY_MS = int(os.getenv("NGROK_RETRY_DELAY_MS", "1000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

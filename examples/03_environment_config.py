"""
Environment Configuration and Logging Examples.
"""

import os
import tempfile

from api_manager import APIManager, APIManagerConfig, LoggingConfig, load_from_env


def load_from_env_file():
    """Load config from a .env file."""
    print("\n=== Load from .env ===")

    with tempfile.TemporaryDirectory() as tmp:
        env_path = os.path.join(tmp, ".env")
        with open(env_path, "w") as f:
            f.write("API_MANAGER_BASE_URL=https://jsonplaceholder.typicode.com\n")
            f.write("API_MANAGER_TIMEOUT_READ=10\n")
            f.write("API_MANAGER_LOG_LEVEL=INFO\n")
            f.write("API_MANAGER_LOG_FORMAT=text\n")

        config = load_from_env(env_file=env_path)

    print(f"base_url: {config.base_url}")
    print(f"timeout: {config.timeout.as_tuple()}")

    with APIManager(config=config) as api:
        api.request("/posts/1", "GET", response_type=dict)


def json_logging():
    """Structured JSON logs with static fields."""
    print("\n=== JSON Logging ===")

    config = APIManagerConfig(
        base_url="https://jsonplaceholder.typicode.com",
        logging=LoggingConfig(
            level="DEBUG",
            format="json",
            static_fields={"service": "mobile-backend"},
        ),
    )

    with APIManager(config=config) as api:
        api.request("/users/1", "GET", response_type=dict)


if __name__ == "__main__":
    load_from_env_file()
    json_logging()

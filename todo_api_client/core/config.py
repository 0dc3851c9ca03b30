"""
Client configuration loader and it handles:
- Environment variables
- Remote endpoint settings
- Transport timeouts

And, the main purpose:
Central place for client configuration.
"""


from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Remote TODO API
    TODO_API_BASE_URL: str = "http://jsonplaceholder.typicode.com"

    # Transport (httpx)
    TODO_API_TIMEOUT_SECONDS: float = 30.0
    TODO_API_CONNECT_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()

'''
Holds all the configurations
'''
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Manages application configuration using environment variables.
    """
    # Application Metadata
    APP_NAME: str = "Dorm Laundry"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Laundry slot reservation frontend server for dormitories."
    TEST_MODE: bool = False

    # Remote backend
    API_BASE_URL: str = "http://localhost:8000"
    API_AUTH_TOKEN: str = ""

    # Session cookie
    AUTH_COOKIE_NAME: str = "auth_token"
    COOKIE_SECURE: bool = True
    USER_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 7
    ADMIN_COOKIE_MAX_AGE: int = 60 * 60 * 24

    BACKEND_CORS_ORIGINS: list[str] = []

    # Slot wizard
    SLOT_DURATION_MINUTES: int = 30
    MAX_DEFAULT_CAPACITY: int = 5
    MAX_CUSTOM_CAPACITY: int = 4

    model_config = SettingsConfigDict(env_file=".env") # automatically loads the .env

# Create a single, importable instance of the settings
settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PRODUCT_SERVICE_", env_file=".env", extra="ignore")

    APP_NAME: str = "Product Service"
    SERVICE_NAME: str = "product-service"
    VERSION: str = "0.3.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    DOCS_URL: str = "/docs"
    OPENAPI_URL: str = "/openapi.json"

    # comma-separated, "*" allows any origin
    CORS_ORIGINS: str = "*"

    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

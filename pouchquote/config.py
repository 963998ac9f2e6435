from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./pouch_quotes.db"
    COMPANY_NAME: str = "Digital Pouch Printing"
    LOG_LEVEL: str = "INFO"

    # Quote defaults, used when a request leaves tax or FX unset
    DEFAULT_VAT_RATE: float = 13.0       # percent
    DEFAULT_EXCHANGE_RATE: float = 7.2   # CNY per 1 USD

    class Config:
        env_file = ".env"


settings = Settings()

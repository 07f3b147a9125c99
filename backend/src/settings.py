from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


# ---------- APP ----------
class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
    env: str = Field("dev", alias="ENV")
    url: str = Field("http://localhost", alias="PUBLIC_ORIGIN")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @property
    def debug(self) -> bool:
        return self.env == "dev"

# ---------- NEWS API ----------
class NewsAPISettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
    api_key: str = Field(..., alias="NEWS_API_KEY")
    url: str = Field("https://newsapi.org/v2", alias="NEWS_API_URL")
    timeout: float = Field(10.0, alias="NEWS_API_TIMEOUT")
    language: str = Field("en", alias="NEWS_LANGUAGE")
    country: str = Field("us", alias="NEWS_COUNTRY")


class Settings:
    app = AppSettings()
    news = NewsAPISettings()


settings = Settings()

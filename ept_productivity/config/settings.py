from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    csv_filename: str = "productivity_analysis.csv"
    report_title: str = "EPT Productivity Calculator"
    strict_ept: bool = True

    model_config = SettingsConfigDict(env_prefix="EPT_", env_file=".env")

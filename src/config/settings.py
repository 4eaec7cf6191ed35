"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "ledgerly.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class InvoiceSettings(BaseSettings):
    """Invoice numbering and defaults."""

    model_config = SettingsConfigDict(env_prefix="INVOICE_")

    prefix: str = "YG"
    counter_width: int = 4
    counter_start: int = 1
    default_payment_terms: str = "Due on receipt"
    default_currency: str = "INR"

    # Blank rows appended to the line table on printed documents
    empty_table_rows: int = 12


class SellerSettings(BaseSettings):
    """Seller identity and bank details attached to every new invoice."""

    model_config = SettingsConfigDict(env_prefix="SELLER_")

    business_name: str = "Yogiraj Men's Wear"
    owner: str = "Yogesh Vasudev Shetty"
    address: str = (
        "3 Gumph Ashram ,Majaswadi,Trishul building,Jogeshwari - East, Mumbai - 4000603"
    )
    contact: str = "Mob: 9967777884 | 8652241919"
    pan_no: str = "ABCDE1234F"

    bank_name: str = "PUNJAB NATIONAL BANK"
    bank_account_name: str = "MR. YOGESH VASUDEV SHETTY"
    bank_account_no: str = "52702413000290"
    bank_ifsc: str = "PUNB0527010"
    bank_upi: str = "yogesh@upi"


class PdfSettings(BaseSettings):
    """Printed document configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    stamp_path: str | None = None
    footer_text: str = "Thank you for your business"
    currency_label: str = "Rs."
    print_delay_ms: int = 100


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Import upload limit
    max_upload_size: int = 10 * 1024 * 1024  # 10 MB


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Ledgerly Invoicing"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    invoice: InvoiceSettings = Field(default_factory=InvoiceSettings)
    seller: SellerSettings = Field(default_factory=SellerSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None

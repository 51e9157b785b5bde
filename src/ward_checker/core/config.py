"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

import json

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ward_checker.lib.geocoder.nominatim import DEFAULT_USER_AGENT, NOMINATIM_API_URL
from ward_checker.lib.geocoder.variations import LocalityConfig
from ward_checker.lib.submission.base import FieldMapping

_DEFAULT_FIELD_MAP = json.dumps(
    {
        "first_name": "first_name",
        "last_name": "last_name",
        "street_address": "street_address",
        "suburb": "suburb",
        "cellphone": "cellphone",
        "gps_pin": "gps_pin",
    }
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ward
    target_ward: str = Field(
        default="44",
        description="Ward identifier every check is evaluated against (e.g. 44 or ward44)",
    )
    ward_boundaries_path: str = Field(
        default="ward_boundaries.json",
        description="Path to the ward boundary file (.json ward mapping or .geojson)",
    )

    @field_validator("target_ward")
    @classmethod
    def validate_target_ward(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "target_ward must not be empty"
            raise ValueError(msg)
        return v

    # Locality
    locality_city: str = Field(default="Pretoria", description="City appended to geocoding queries")
    locality_region: str = Field(default="Gauteng", description="Region/province appended to geocoding queries")
    locality_country: str = Field(default="South Africa", description="Country appended to geocoding queries")
    locality_country_code: str = Field(
        default="za",
        description="ISO country code the provider search is restricted to",
    )
    local_place_tokens: str = Field(
        default="gauteng,pretoria,tshwane",
        description="Comma-separated place names that mark a candidate as local",
    )

    @property
    def local_place_token_list(self) -> list[str]:
        """Parse local place tokens into a lowercase list."""
        if not self.local_place_tokens.strip():
            return []
        return [t.strip().lower() for t in self.local_place_tokens.split(",") if t.strip()]

    @property
    def locality(self) -> LocalityConfig:
        """Locality suffixes and relevance tokens for the resolver."""
        return LocalityConfig(
            city=self.locality_city,
            region=self.locality_region,
            country=self.locality_country,
            country_code=self.locality_country_code,
            local_tokens=tuple(self.local_place_token_list),
        )

    # Geocoding (Nominatim, OpenStreetMap)
    geocoder_nominatim_url: str = Field(
        default=NOMINATIM_API_URL,
        description="Nominatim search endpoint",
    )
    geocoder_nominatim_email: str = Field(
        default="",
        description="Email for Nominatim usage policy compliance",
    )
    geocoder_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="Identifying client label sent as User-Agent",
    )
    geocoder_timeout: float = Field(
        default=10.0,
        description="Geocoder request timeout in seconds",
        gt=0,
    )
    geocoder_result_limit: int = Field(
        default=3,
        description="Candidates requested per query",
        gt=0,
        le=50,
    )
    geocoder_retry_delay: float | None = Field(
        default=None,
        description="Seconds to wait between unsuccessful geocoding attempts (provider rate limit when unset)",
        ge=0,
    )

    # Submission sink
    submission_url: str | None = Field(
        default=None,
        description="Form endpoint receiving completed checks (log-only when unset)",
    )
    submission_field_map: str = Field(
        default=_DEFAULT_FIELD_MAP,
        description="JSON object mapping record fields to remote form field names",
    )
    submission_timeout: float = Field(
        default=10.0,
        description="Submission request timeout in seconds",
        gt=0,
    )

    @field_validator("submission_url")
    @classmethod
    def validate_submission_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        if not v.startswith(("https://", "http://")):
            msg = "submission_url must be an http(s) URL"
            raise ValueError(msg)
        return v.strip()

    @field_validator("submission_field_map")
    @classmethod
    def validate_submission_field_map(cls, v: str) -> str:
        try:
            mapping = json.loads(v)
        except json.JSONDecodeError as e:
            msg = f"submission_field_map is not valid JSON: {e}"
            raise ValueError(msg) from e
        if not isinstance(mapping, dict):
            msg = "submission_field_map must be a JSON object"
            raise ValueError(msg)
        missing = set(json.loads(_DEFAULT_FIELD_MAP)) - set(mapping)
        if missing:
            msg = f"submission_field_map is missing fields: {', '.join(sorted(missing))}"
            raise ValueError(msg)
        FieldMapping.from_mapping(mapping)
        return v

    @property
    def submission_fields(self) -> FieldMapping:
        """Parsed submission field mapping."""
        return FieldMapping.from_mapping(json.loads(self.submission_field_map))

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()

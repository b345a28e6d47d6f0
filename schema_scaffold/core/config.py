"""Configuration for the schema scaffold generator."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError

ENV_PREFIX = "SCHEMA_SCAFFOLD_"


class FileNamesConfig(BaseModel):
    """Configuration for generated file names."""

    struct_file: str = "structs.go"
    sql_file: str = "tables.sql"


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_file_system: int = 1
    error_interrupted: int = 2
    error_unexpected: int = 3


class Config(BaseSettings):
    """Main configuration class for the schema scaffold generator."""

    output_dir: Path = Field(
        default=Path("out"), description="Directory for generated files"
    )
    sentinel: str = Field(
        default=".exit", description="Input token that ends a collection level"
    )
    struct_package: str = Field(
        default="structs", description="Go package name for generated structs"
    )

    # Nested configurations
    file_names: FileNamesConfig = Field(default_factory=FileNamesConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("sentinel")
    @classmethod
    def validate_sentinel(cls, v: str) -> str:
        """Sentinel must survive line trimming and tokenizing unchanged."""
        if not v or v != v.strip() or any(ch.isspace() for ch in v):
            raise ValueError("Sentinel must be non-empty and contain no whitespace")
        return v

    @field_validator("struct_package")
    @classmethod
    def validate_struct_package(cls, v: str) -> str:
        """Validate Go package name format."""
        if not v.isidentifier():
            raise ValueError("Package name must be a valid identifier")
        return v

    def __init__(self, **data):
        """Initialize config, reporting bad values as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_path = "__".join(str(part) for part in error["loc"]) or "unknown"
            raise ConfigurationError(
                variable_name=f"{ENV_PREFIX}{field_path}".upper(),
                reason=error["msg"],
            ) from e


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProblemSettings(BaseSettings):
    """Problem response settings loaded from environment variables.

    Pydantic Settings reads env vars prefixed with ``PROBLEM_`` (case-insensitive).
    In development, it also reads from .env file if present.
    """

    # Prepended to every problem type emitted by the exception handlers.
    # Empty keeps short tokens ("not_found"); set it to a URI base such as
    # "https://errors.example.com/" to emit "https://errors.example.com/not_found".
    type_base: str = ""

    model_config = SettingsConfigDict(
        env_prefix="PROBLEM_",
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = ProblemSettings()

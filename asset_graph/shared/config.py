"""
Base configuration for the asset graph service.

Uses Pydantic Settings for environment-based configuration.
The gateway extends BaseAppSettings with its own prefix.
"""

from pydantic_settings import BaseSettings


class BaseAppSettings(BaseSettings):
    """Settings shared by every entry point."""

    app_name: str = "asset_graph"

    # Neo4j connection
    neo4j_uri: str = ""
    neo4j_username: str = "neo4j"
    neo4j_password: str = ""
    neo4j_database: str = "neo4j"

    # Create the Asset.id uniqueness constraint on startup
    ensure_constraints: bool = True

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

"""Gateway configuration."""

from asset_graph.shared.config import BaseAppSettings


class GatewaySettings(BaseAppSettings):
    """Settings specific to the FastAPI Gateway."""

    app_name: str = "gateway"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    class Config(BaseAppSettings.Config):
        env_prefix = "GATEWAY_"

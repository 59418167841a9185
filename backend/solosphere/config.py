from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 5000
    # Full connection string; when unset it is built from the Atlas credentials.
    mongodb_uri: str | None = None
    db_user: str | None = None
    db_pass: str | None = None
    db_cluster: str = "cluster0.kvlax.mongodb.net"
    database_name: str = "solo-db"
    secret_key: str = ""
    node_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]
    session_ttl_days: int = 365
    session_cookie_name: str = "token"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

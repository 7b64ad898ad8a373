"""Configuration loader for analyzer-api."""

from dataclasses import asdict, dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from common.config import LazySingleton, find_config_path, get_env, load_yaml

load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
CONFIG_ENV_VAR = "ANALYZER_API_CONFIG"


@dataclass
class GoogleCredentialsConfig:
    """Service-account fields for the Natural Language API."""
    type: str | None = None
    project_id: str | None = None
    private_key_id: str | None = None
    private_key: str | None = None
    client_email: str | None = None
    client_id: str | None = None
    auth_uri: str | None = None
    token_uri: str | None = None
    auth_provider_x509_cert_url: str | None = None
    client_x509_cert_url: str | None = None
    universe_domain: str | None = None

    @classmethod
    def from_env(cls) -> "GoogleCredentialsConfig":
        private_key = get_env("GOOGLE_PRIVATE_KEY")
        if private_key is not None:
            # Keys stored in .env files carry escaped newlines
            private_key = private_key.replace("\\n", "\n")
        return cls(
            type=get_env("GOOGLE_TYPE"),
            project_id=get_env("GOOGLE_PROJECT_ID"),
            private_key_id=get_env("GOOGLE_PRIVATE_KEY_ID"),
            private_key=private_key,
            client_email=get_env("GOOGLE_CLIENT_EMAIL"),
            client_id=get_env("GOOGLE_CLIENT_ID"),
            auth_uri=get_env("GOOGLE_AUTH_URI"),
            token_uri=get_env("GOOGLE_TOKEN_URI"),
            auth_provider_x509_cert_url=get_env("GOOGLE_AUTH_PROVIDER_CERT_URL"),
            client_x509_cert_url=get_env("GOOGLE_CLIENT_CERT_URL"),
            universe_domain=get_env("GOOGLE_UNIVERSE_DOMAIN"),
        )

    def to_service_account_info(self) -> dict[str, str | None]:
        return asdict(self)


@dataclass
class KnowledgeGraphConfig:
    api_key: str | None = None
    base_url: str = "https://kgsearch.googleapis.com/v1/entities:search"
    types: str = "Organization"
    limit: int = 3


@dataclass
class HttpConfig:
    timeout_seconds: float = 10.0
    user_agent: str = "news-company-analyzer/1.0"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@dataclass
class AnalyzerConfig:
    google: GoogleCredentialsConfig = field(default_factory=GoogleCredentialsConfig)
    knowledge_graph: KnowledgeGraphConfig = field(default_factory=KnowledgeGraphConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(config_name: str | None = None) -> AnalyzerConfig:
    """Load configuration from YAML file plus environment secrets.

    Args:
        config_name: Name of config file (without .yaml extension). Falls back
            to $ANALYZER_API_CONFIG, then "prod".

    Returns:
        AnalyzerConfig instance
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    raw = load_yaml(config_path)

    kg_raw = raw.get("knowledge_graph", {})
    kg_config = KnowledgeGraphConfig(
        api_key=get_env("GOOGLE_KG_API_KEY"),
        base_url=kg_raw.get("base_url", KnowledgeGraphConfig.base_url),
        types=kg_raw.get("types", "Organization"),
        limit=kg_raw.get("limit", 3),
    )

    http_raw = raw.get("http", {})
    http_config = HttpConfig(
        timeout_seconds=http_raw.get("timeout_seconds", 10.0),
        user_agent=http_raw.get("user_agent", HttpConfig.user_agent),
    )

    server_raw = raw.get("server", {})
    server_config = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=server_raw.get("port", 8000),
        reload=server_raw.get("reload", False),
    )

    return AnalyzerConfig(
        google=GoogleCredentialsConfig.from_env(),
        knowledge_graph=kg_config,
        http=http_config,
        server=server_config,
    )


_manager: LazySingleton[AnalyzerConfig] = LazySingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset

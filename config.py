import os, logging
from dataclasses import dataclass

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_PORT = 3005
DEFAULT_FORTIVOICE_TEMPLATE = "https://{ip}/admin"
SITES_FILENAME = "data.json"
MATRICES_FILENAME = "port-matrices.json"

# Large spreadsheet pastes
MAX_CONTENT_LENGTH = 50 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    admin_password: str = ""
    fortivoice_url_template: str = DEFAULT_FORTIVOICE_TEMPLATE
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    data_dir: str = BASE_DIR
    public_dir: str = os.path.join(BASE_DIR, "public")
    log_level: str = "INFO"

    @property
    def sites_path(self) -> str:
        return os.path.join(self.data_dir, SITES_FILENAME)

    @property
    def matrices_path(self) -> str:
        return os.path.join(self.data_dir, MATRICES_FILENAME)


def load_settings(env=None) -> Settings:
    env = os.environ if env is None else env
    return Settings(
        admin_password=env.get("ADMIN_PASSWORD", ""),
        fortivoice_url_template=env.get("FORTIVOICE_URL_TEMPLATE") or DEFAULT_FORTIVOICE_TEMPLATE,
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", str(DEFAULT_PORT))),
        data_dir=env.get("DATA_DIR") or BASE_DIR,
        public_dir=env.get("PUBLIC_DIR") or os.path.join(BASE_DIR, "public"),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

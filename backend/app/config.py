from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from decaygraph.config.settings import (
    GraphConfig,
    QueryConfig,
    DecayGraphConfig,
)

settings = Dynaconf(
    envvar_prefix="DECAYGRAPH",
    load_dotenv=True,
    settings_files=[],
)


def _setting(key: str):
    return settings.get(key, DEFAULTS[key])


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = _setting("APP_NAME")
    api_prefix: str = _setting("API_PREFIX")

    # ---------------- Logging ----------------
    log_level: str = str(_setting("LOG_LEVEL")).upper()
    log_format: str = _setting("LOG_FORMAT")

    # ---------------- Graph ----------------
    seed_edges: str = _setting("SEED_EDGES")

    # ---------------- Decay Policy ----------------
    decay: DecayGraphConfig = DecayGraphConfig(
        graph=GraphConfig(
            log_build=_setting("LOG_BUILD"),
        ),
        query=QueryConfig(
            min_expiration=_setting("MIN_EXPIRATION"),
            report_template=_setting("REPORT_TEMPLATE"),
        ),
    )

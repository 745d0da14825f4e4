# ============================================================================
# zerohour/base/config.py
# Application Configuration Management
# ============================================================================
#
# PURPOSE:
# Every tunable of the demo backend lives here: the scenario/state catalog
# vocabulary, the admin token, the server address and logging behaviour.
# The rest of the code reads settings from one ZeroHourConfig instance.
#
# KEY CONCEPTS:
# 1. Frozen dataclasses: settings can't change after startup
# 2. Environment variables: ZEROHOUR_* overrides (e.g. ZEROHOUR_ADMIN_TOKEN)
# 3. Lazy singleton: get_config() builds the config on first use only
#
# ============================================================================

from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from zerohour.errors import ZeroHourError, ErrorCode

logger = logging.getLogger(__name__)


# ============================================================================
# Catalog Configuration
# ============================================================================
# The fixed vocabulary the state engine and scenario catalog agree on.

@dataclass(frozen=True)
class TargetEntityConfig:
    # The notional organization the dashboard is "monitoring"
    name: str = "MERIDIAN HOLDINGS"
    id: str = "E-08471"


@dataclass(frozen=True)
class CountdownConfig:
    # Minute offsets from "now" used by the countdown panel
    # detected is in the past (1h 46min ago), the other two in the future
    detected: int = -106
    window_closes: int = 98
    exposure_lost: int = 248


@dataclass(frozen=True)
class CatalogConfig:
    # Escalation states, ordered from least to most severe.
    # Order matters: it drives timeline neighbours, signal trajectories
    # and countdown scaling.
    valid_states: Tuple[str, ...] = (
        "normal",
        "signal_convergence",
        "exposure_window_open",
        "escalation_imminent",
    )

    valid_scenarios: Tuple[str, ...] = (
        "cyber_breach_pre_disclosure",
        "weaponized_public_narrative",
        "legal_escalation_pre_filing",
        "third_party_exposure_event",
    )

    # Fixed risk domains reported on every state view
    domains: Tuple[str, ...] = ("legal", "cyber", "reputational", "third_party")

    # Allowed values inside the scenario table
    risk_levels: Tuple[str, ...] = ("low", "elevated", "high")
    confidence_levels: Tuple[str, ...] = ("medium", "high")
    domain_statuses: Tuple[str, ...] = ("neutral", "forming", "active")

    # Where the engine starts, and where reset() returns to
    default_scenario: str = "cyber_breach_pre_disclosure"
    default_state: str = "normal"

    target_entity: TargetEntityConfig = field(default_factory=TargetEntityConfig)
    countdown: CountdownConfig = field(default_factory=CountdownConfig)

    def __post_init__(self):
        if self.default_scenario not in self.valid_scenarios:
            raise ValueError(
                f"default_scenario '{self.default_scenario}' is not one of {list(self.valid_scenarios)}"
            )
        if self.default_state not in self.valid_states:
            raise ValueError(
                f"default_state '{self.default_state}' is not one of {list(self.valid_states)}"
            )

    def state_index(self, state: str) -> int:
        """0-based position of state in the escalation order, -1 if unknown."""
        try:
            return self.valid_states.index(state)
        except ValueError:
            return -1


# ============================================================================
# Security Configuration
# ============================================================================

@dataclass(frozen=True)
class SecurityConfig:
    # Shared secret for the /admin endpoints (Authorization: Bearer <token>)
    # The demo ships with a well-known token; override it with ZEROHOUR_ADMIN_TOKEN
    admin_token: str = "DEMO_ADMIN_TOKEN"

    # Origins allowed to call the API from a browser. "*" = anyone
    allowed_origins: Tuple[str, ...] = ("*",)


# ============================================================================
# Logging Configuration
# ============================================================================

@dataclass(frozen=True)
class LogConfig:
    # DEBUG / INFO / WARNING / ERROR
    level: str = "INFO"

    # %(name)s is the module that logged (e.g. "zerohour.engine.state_engine")
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # Console logging is always on; file logging is opt-in
    file_enabled: bool = False
    file_path: str = "zerohour.log"

    # Rotate at 10 MB, keep 5 old files
    max_file_size_mb: int = 10
    backup_count: int = 5

    # The request logger ignores static asset hits
    skip_static_suffixes: Tuple[str, ...] = (".html", ".css", ".js", ".ico", ".png", ".jpg")


# ============================================================================
# Master Configuration Container
# ============================================================================

@dataclass(frozen=True)
class ZeroHourConfig:
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    log: LogConfig = field(default_factory=LogConfig)

    # Extra logging and uvicorn reload-friendly behaviour
    debug: bool = False

    # 127.0.0.1 = this machine only; 0.0.0.0 to expose the demo on the network
    api_host: str = "127.0.0.1"
    api_port: int = 3000

    # Placeholder frontend, mounted at / when the directory exists
    static_dir: str = "public"

    @classmethod
    def from_env(cls) -> "ZeroHourConfig":
        """Build a config from ZEROHOUR_* environment variables."""
        defaults = CountdownConfig()
        countdown = CountdownConfig(
            detected=_env_int("ZEROHOUR_COUNTDOWN_DETECTED", defaults.detected),
            window_closes=_env_int("ZEROHOUR_COUNTDOWN_WINDOW_CLOSES", defaults.window_closes),
            exposure_lost=_env_int("ZEROHOUR_COUNTDOWN_EXPOSURE_LOST", defaults.exposure_lost),
        )

        target_defaults = TargetEntityConfig()
        target = TargetEntityConfig(
            name=os.getenv("ZEROHOUR_TARGET_NAME", target_defaults.name),
            id=os.getenv("ZEROHOUR_TARGET_ID", target_defaults.id),
        )

        catalog = CatalogConfig(target_entity=target, countdown=countdown)

        # Split "http://a.com,http://b.com" into ("http://a.com", "http://b.com")
        origins_str = os.getenv("ZEROHOUR_ALLOWED_ORIGINS", "")
        origins = tuple(o.strip() for o in origins_str.split(",") if o.strip()) or ("*",)

        security = SecurityConfig(
            admin_token=os.getenv("ZEROHOUR_ADMIN_TOKEN") or SecurityConfig.admin_token,
            allowed_origins=origins,
        )

        log_file = os.getenv("ZEROHOUR_LOG_FILE", "")
        log = LogConfig(
            level=os.getenv("ZEROHOUR_LOG_LEVEL", "INFO"),
            file_enabled=bool(log_file),
            file_path=log_file or LogConfig.file_path,
        )

        # PORT is honoured too, since most PaaS hosts set it
        port = _env_int("ZEROHOUR_API_PORT", _env_int("PORT", 3000))

        return cls(
            catalog=catalog,
            security=security,
            log=log,
            debug=os.getenv("ZEROHOUR_DEBUG", "false").lower() == "true",
            api_host=os.getenv("ZEROHOUR_API_HOST", "127.0.0.1"),
            api_port=port,
            static_dir=os.getenv("ZEROHOUR_STATIC_DIR", "public"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ZeroHourError(
            ErrorCode.CONFIG_INVALID,
            f"Environment variable {name} must be an integer",
            details={"variable": name, "value": raw},
        )


# ============================================================================
# Global Configuration Singleton
# ============================================================================

_config: Optional[ZeroHourConfig] = None


def get_config() -> ZeroHourConfig:
    """
    Get the global configuration instance.

    Created from the environment on first call, then reused.
    """
    global _config
    if _config is None:
        _config = ZeroHourConfig.from_env()
    return _config


def set_config(config: Optional[ZeroHourConfig]) -> None:
    """
    Replace the global configuration (mainly used for testing).

    Passing None makes the next get_config() re-read the environment.
    """
    global _config
    _config = config


def setup_logging(config: Optional[ZeroHourConfig] = None) -> None:
    """
    Configure Python's logging system based on our settings.

    Console always, plus a rotating file when LogConfig.file_enabled is set.
    Call this once at application startup.
    """
    cfg = config or get_config()

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if cfg.log.file_enabled:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            cfg.log.file_path,
            maxBytes=cfg.log.max_file_size_mb * 1024 * 1024,
            backupCount=cfg.log.backup_count,
        )
        handlers.append(file_handler)

    level = "DEBUG" if cfg.debug else cfg.log.level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=cfg.log.format,
        handlers=handlers,
        force=True,
    )

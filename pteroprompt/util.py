# pteroprompt/util.py
import os

ADDRESS_ENV = "PTEROPROMPT_RCON_ADDRESS"
PASSWORD_ENV = "PTEROPROMPT_RCON_PASSWORD"
TIMEOUT_ENV = "PTEROPROMPT_RCON_TIMEOUT"

DEFAULT_TIMEOUT = 5.0

def env_address() -> str:
    return os.environ.get(ADDRESS_ENV, "").strip()

def env_password() -> str:
    return os.environ.get(PASSWORD_ENV, "").strip()

def env_timeout(default: float = DEFAULT_TIMEOUT) -> float:
    raw = os.environ.get(TIMEOUT_ENV, "").strip()
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}")
    if val <= 0:
        raise ValueError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return val

def yesno(v: bool) -> str:
    return "yes" if v else "no"

def onoff(v: bool) -> str:
    return "on" if v else "off"

def percent(fraction: float) -> int:
    """Player vitals arrive as 0..1 fractions; older servers send 0..100."""
    return int(round(fraction * 100)) if fraction <= 1.0 else int(round(fraction))


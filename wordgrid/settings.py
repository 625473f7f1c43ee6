import os
from dataclasses import dataclass, field
from pathlib import Path


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    WORDS_URL: str = "https://raw.githubusercontent.com/mister-giga/words/main/ordered-alphabetically-ascending.txt"
    WORDS_PATH: Path = field(init=False)
    HTTP_TIMEOUT: float = 30.0

    GRID_STRING: str = "brpgejkke"
    WIDTH: int = 3
    HEIGHT: int = 3
    DIAGONALS: bool = True

    WORKERS: int = 1
    DEDUPE_OUTPUT: bool = False
    STRICT_WORDS: bool = False
    MAX_RESULTS: int = 0

    DEBUG: bool = False

    def __post_init__(self):
        self.WORDS_PATH = self.BASE_DIR / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed while the service is running
EDITABLE_FIELDS: dict[str, type] = {
    "WORDS_URL": str,
    "HTTP_TIMEOUT": float,
    "DIAGONALS": bool,
    "WORKERS": int,
    "DEDUPE_OUTPUT": bool,
    "STRICT_WORDS": bool,
    "MAX_RESULTS": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to `cfg`. Returns {field: error} for the ones rejected."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "unknown field" if not hasattr(cfg, name) else "not editable"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
    return errors


settings = Settings()

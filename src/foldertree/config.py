from __future__ import annotations
import os, sys
from typing import List
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_CONFIG_TOML = "foldertree.toml"

class AppSettings(BaseModel):
    env: str = "dev"
    log_level: str = "INFO"

class PrinterSettings(BaseModel):
    # folder names hidden from `foldertree print` unless --skip is given
    skip: List[str] = []
    sort: bool = False
    last_by_visible: bool = True

class ParserSettings(BaseModel):
    strict: bool = False

class Settings(BaseModel):
    app: AppSettings = AppSettings()
    printer: PrinterSettings = PrinterSettings()
    parser: ParserSettings = ParserSettings()

def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")

def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]

def load_settings(config_path: str | None = None) -> Settings:
    """
    Build settings from (lowest to highest priority):
      defaults -> TOML file -> environment (.env included).
    A missing TOML file is not an error.
    """
    load_dotenv(find_dotenv(usecwd=True))
    path = config_path or os.getenv("FOLDERTREE_CONFIG", DEFAULT_CONFIG_TOML)

    data = {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        pass

    # env overrides
    app = data.get("app", {})
    app["env"] = os.getenv("ENV", app.get("env", "dev"))
    app["log_level"] = os.getenv("LOG_LEVEL", app.get("log_level", "INFO"))
    data["app"] = app

    printer = data.get("printer", {})
    printer["skip"] = _env_list("FOLDERTREE_SKIP", printer.get("skip", []))
    printer["sort"] = _env_bool("FOLDERTREE_SORT", printer.get("sort", False))
    data["printer"] = printer

    parser = data.get("parser", {})
    parser["strict"] = _env_bool("FOLDERTREE_STRICT", parser.get("strict", False))
    data["parser"] = parser

    return Settings(**data)

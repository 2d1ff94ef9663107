#
# File: config.py
# Revision: 10
# Description: Resolves where to scan and where to cache. Command-line flags
# win over environment variables, which win over ~/.gitjump/settings.json,
# which wins over the built-in defaults.
#

import argparse
import json
import logging
import os
import re
from pathlib import Path
from typing import Optional, List, Dict, Any

from dotenv import load_dotenv

from services.repo_scanner import DEFAULT_SKIP_SUFFIXES
from utils.ignore_rules import IgnoreRules
from utils.paths import (
    GITJUMP_DIR,
    get_default_cache_file,
    get_default_root_dir,
    get_user_settings_dir,
    to_absolute,
)

# --- Constants ---
SETTINGS_DIRECTORY_NAME = GITJUMP_DIR
USER_SETTINGS_DIR = get_user_settings_dir()
USER_SETTINGS_PATH = USER_SETTINGS_DIR / 'settings.json'

ENV_ROOT = 'GITJUMP_ROOT'
ENV_CACHE_FILE = 'GITJUMP_CACHE_FILE'

class Config:
    def __init__(self, config_dict: dict):
        self._config = config_dict
        self._ignore_rules: Optional[IgnoreRules] = None

    def get_root_dir(self) -> Path:
        return to_absolute(self._config.get("root_path") or get_default_root_dir())

    def get_cache_file(self) -> Path:
        return to_absolute(self._config.get("cache_file") or get_default_cache_file())

    def get_skip_suffixes(self) -> List[str]:
        suffixes = self._config.get("skip_suffixes")
        return list(DEFAULT_SKIP_SUFFIXES if suffixes is None else suffixes)

    def get_ignore_rules(self) -> IgnoreRules:
        """Builds the ignore rules for the configured root once and reuses them."""
        if self._ignore_rules is None:
            self._ignore_rules = IgnoreRules(self.get_root_dir(), self._config.get("ignore_patterns") or [])
        return self._ignore_rules

def find_env_file(start_dir: Path) -> Optional[Path]:
    current_dir = start_dir.resolve()
    while True:
        gitjump_env_path = current_dir / SETTINGS_DIRECTORY_NAME / '.env'
        if gitjump_env_path.exists(): return gitjump_env_path
        env_path = current_dir / '.env'
        if env_path.exists(): return env_path
        parent_dir = current_dir.parent
        if parent_dir == current_dir:
            home_gitjump_env = Path.home() / SETTINGS_DIRECTORY_NAME / '.env'
            if home_gitjump_env.exists(): return home_gitjump_env
            home_env = Path.home() / '.env'
            if home_env.exists(): return home_env
            return None
        current_dir = parent_dir

def resolve_env_vars(config_obj: Any) -> Any:
    if isinstance(config_obj, dict):
        return {k: resolve_env_vars(v) for k, v in config_obj.items()}
    elif isinstance(config_obj, list):
        return [resolve_env_vars(i) for i in config_obj]
    elif isinstance(config_obj, str):
        env_var_regex = r'\$(?:(\w+)|{([^}]+)})'
        def replace_env(match):
            var_name = match.group(1) or match.group(2)
            return os.environ.get(var_name, match.group(0))
        return re.sub(env_var_regex, replace_env, config_obj)
    return config_obj

def load_settings_file(file_path: Path) -> Dict:
    if not file_path.exists(): return {}
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = "".join(line for line in f if not line.strip().startswith('//'))
            settings = resolve_env_vars(json.loads(content))
    except (IOError, json.JSONDecodeError) as e:
        logging.warning(f"Could not load or parse settings from {file_path}: {e}")
        return {}
    if not isinstance(settings, dict):
        logging.warning(f"Ignoring settings in {file_path}: expected a JSON object.")
        return {}
    return settings

def _string_list(settings: Dict, key: str) -> Optional[List[str]]:
    value = settings.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        logging.warning(f"Ignoring setting '{key}': expected a list of strings.")
        return None
    return value

def load_final_config(cli_args: argparse.Namespace = None, settings_path: Path = None) -> Config:
    args = cli_args if cli_args is not None else argparse.Namespace()
    env_file_path = find_env_file(Path.cwd())
    if env_file_path:
        load_dotenv(dotenv_path=env_file_path, override=False)
        logging.debug(f"Loaded environment variables from: {env_file_path}")
    settings = load_settings_file(settings_path or USER_SETTINGS_PATH)
    raw_config_dict = {
        "root_path": (getattr(args, 'root', None) or os.getenv(ENV_ROOT) or settings.get("rootPath")),
        "cache_file": (getattr(args, 'cache_file', None) or os.getenv(ENV_CACHE_FILE) or settings.get("cacheFile")),
        "skip_suffixes": _string_list(settings, "skipSuffixes"),
        "ignore_patterns": _string_list(settings, "ignorePatterns"),
    }
    return Config(raw_config_dict)

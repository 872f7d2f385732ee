"""Configuration management for fastwild."""

import os
import json
import yaml
from typing import Dict, Optional, Any

from .logger import LEVELS


DEFAULT_SUITES = ["tame", "empty", "wild", "utf8"]


def _parse_bool(value: str) -> bool:
    return value.lower() == "true"


def _parse_list(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Configuration manager with file and environment variable support."""

    def __init__(self, config_file: Optional[str] = None):
        self.config: Dict[str, Any] = {}
        self.config_file = config_file or os.getenv('FASTWILD_CONFIG', 'fastwild.yaml')
        self._load_config()
        self._load_env_overrides()

    def _load_config(self):
        """Load configuration from file, layered over the defaults."""
        self._set_defaults()
        if not os.path.exists(self.config_file):
            return

        try:
            with open(self.config_file, 'r') as f:
                if self.config_file.endswith('.yaml') or self.config_file.endswith('.yml'):
                    loaded = yaml.safe_load(f) or {}
                elif self.config_file.endswith('.json'):
                    loaded = json.load(f)
                else:
                    return
        except (OSError, ValueError, yaml.YAMLError):
            return

        if not isinstance(loaded, dict):
            return

        for section, values in loaded.items():
            if isinstance(values, dict):
                self.config.setdefault(section, {}).update(values)

    def _set_defaults(self):
        """Set default configuration values."""
        self.config = {
            "harness": {
                "reps": 1,
                "compare_performance": False,
                "ignore_case": True,
                "suites": list(DEFAULT_SUITES),
                "cases_file": None
            },
            "matcher": {
                "single_wildcard": "?",
                "multi_wildcard": "*",
                "encoding": "utf-8",
                "decode_errors": "strict"
            },
            "logging": {
                "level": "INFO"
            },
            "monitoring": {
                "prometheus_enabled": False,
                "prometheus_port": 9090
            }
        }

    def _load_env_overrides(self):
        """Override config with environment variables."""
        env_mappings = {
            "FASTWILD_REPS": ("harness", "reps", int),
            "FASTWILD_COMPARE_PERFORMANCE": ("harness", "compare_performance", _parse_bool),
            "FASTWILD_IGNORE_CASE": ("harness", "ignore_case", _parse_bool),
            "FASTWILD_SUITES": ("harness", "suites", _parse_list),
            "FASTWILD_CASES_FILE": ("harness", "cases_file"),
            "FASTWILD_SINGLE_WILDCARD": ("matcher", "single_wildcard"),
            "FASTWILD_MULTI_WILDCARD": ("matcher", "multi_wildcard"),
            "FASTWILD_ENCODING": ("matcher", "encoding"),
            "FASTWILD_DECODE_ERRORS": ("matcher", "decode_errors"),
            "FASTWILD_LOG_LEVEL": ("logging", "level", str.upper),
            "PROMETHEUS_ENABLED": ("monitoring", "prometheus_enabled", _parse_bool),
            "PROMETHEUS_PORT": ("monitoring", "prometheus_port", int)
        }

        for env_key, (section, key, *converters) in env_mappings.items():
            value = os.getenv(env_key)
            if value is not None:
                if converters:
                    converter = converters[0]
                    try:
                        value = converter(value)
                    except (ValueError, TypeError):
                        continue
                if section not in self.config:
                    self.config[section] = {}
                self.config[section][key] = value

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any):
        """Set configuration value."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def save(self, filename: Optional[str] = None):
        """Save configuration to file."""
        target_file = filename or self.config_file
        with open(target_file, 'w') as f:
            if target_file.endswith('.yaml') or target_file.endswith('.yml'):
                yaml.dump(self.config, f, default_flow_style=False, allow_unicode=True)
            else:
                json.dump(self.config, f, indent=2)

    def validate(self) -> tuple[bool, list[str]]:
        """Validate configuration."""
        errors = []

        reps = self.get("harness", "reps")
        if not isinstance(reps, int) or isinstance(reps, bool) or reps < 1:
            errors.append("Repetitions must be a positive integer")

        single = self.get("matcher", "single_wildcard")
        multi = self.get("matcher", "multi_wildcard")
        for name, marker in (("single", single), ("multi", multi)):
            if not isinstance(marker, str) or len(marker) != 1:
                errors.append(f"The {name} wildcard marker must be a single character")
        if single == multi:
            errors.append("Single and multi wildcard markers must differ")

        if str(self.get("logging", "level", "")).upper() not in LEVELS:
            errors.append(f"Unknown log level: {self.get('logging', 'level')}")

        if self.get("monitoring", "prometheus_enabled"):
            port = self.get("monitoring", "prometheus_port")
            if not isinstance(port, int) or port < 1 or port > 65535:
                errors.append("Invalid Prometheus port")

        return len(errors) == 0, errors

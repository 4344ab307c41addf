"""Configuration, credentials and LangSmith setup."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Literal, Mapping, Optional

import yaml

from issuelabel.errors import ConfigError


# Default values
DEFAULT_MODEL = "claude-haiku-4-5"
DEFAULT_UNKNOWN_LABELS = "keep"
UNKNOWN_LABEL_POLICIES = ("keep", "drop")

# Config file path (relative to cwd)
CONFIG_PATH = "issuelabel.yml"

UnknownLabelPolicy = Literal["keep", "drop"]


@dataclass(frozen=True)
class RepositoryRef:
    """Target repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class LabelRule:
    """Natural-language condition under which a label applies."""

    condition: str


@dataclass(frozen=True)
class LabelerConfig:
    """Main configuration class. Read-only for the whole run."""

    repository: RepositoryRef
    labels: Mapping[str, LabelRule] = field(default_factory=lambda: MappingProxyType({}))
    model: str = DEFAULT_MODEL
    unknown_labels: UnknownLabelPolicy = DEFAULT_UNKNOWN_LABELS


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{name}' must be a non-empty string")
    return value.strip()


def _parse_repository(data: dict) -> RepositoryRef:
    repo = data.get("repository")
    if not isinstance(repo, dict):
        raise ConfigError("'repository' section with 'owner' and 'name' is required")
    return RepositoryRef(
        owner=_require_str(repo.get("owner"), "repository.owner"),
        name=_require_str(repo.get("name"), "repository.name"),
    )


def _parse_labels(data: dict) -> Mapping[str, LabelRule]:
    raw = data.get("labels") or {}
    if not isinstance(raw, dict):
        raise ConfigError("'labels' must be a mapping of label name to rule")

    labels = {}
    for name, rule in raw.items():
        # Shorthand: "bug: reports a crash"
        if isinstance(rule, str):
            condition = rule
        elif isinstance(rule, dict):
            condition = rule.get("condition")
        else:
            condition = None
        labels[str(name)] = LabelRule(
            condition=_require_str(condition, f"labels.{name}.condition")
        )
    return MappingProxyType(labels)


def _parse_policy(value: object) -> UnknownLabelPolicy:
    if value not in UNKNOWN_LABEL_POLICIES:
        raise ConfigError(
            f"'unknown_labels' must be one of {', '.join(UNKNOWN_LABEL_POLICIES)}, got {value!r}"
        )
    return value  # type: ignore[return-value]


def load_config(path: Optional[Path] = None) -> LabelerConfig:
    """Load issuelabel configuration.

    Priority (highest to lowest):
    1. Environment variables (ISSUELABEL_MODEL, ISSUELABEL_UNKNOWN_LABELS)
    2. Config file (issuelabel.yml)
    3. Package defaults

    Args:
        path: Path to the YAML config file. Defaults to ./issuelabel.yml.

    Returns:
        LabelerConfig instance

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        path = Path.cwd() / CONFIG_PATH

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    model = data.get("model", DEFAULT_MODEL)
    unknown_labels = data.get("unknown_labels", DEFAULT_UNKNOWN_LABELS)

    # Override with environment variables
    if env_model := os.environ.get("ISSUELABEL_MODEL"):
        model = env_model
    if env_policy := os.environ.get("ISSUELABEL_UNKNOWN_LABELS"):
        unknown_labels = env_policy

    return LabelerConfig(
        repository=_parse_repository(data),
        labels=_parse_labels(data),
        model=_require_str(model, "model"),
        unknown_labels=_parse_policy(unknown_labels),
    )


def get_github_token() -> str:
    """Return the GitHub token from the environment."""
    token = os.environ.get("GITHUB_TOKEN")
    if not token:
        raise ConfigError("GITHUB_TOKEN environment variable is required")
    return token


def require_anthropic_key() -> None:
    """Fail early when the Anthropic API key is missing."""
    if not os.environ.get("ANTHROPIC_API_KEY"):
        raise ConfigError("ANTHROPIC_API_KEY environment variable is required")


def setup_langsmith() -> bool:
    """Configure LangSmith tracing if API key is available.

    Returns:
        True if LangSmith is enabled, False otherwise.
    """
    if not os.environ.get("LANGCHAIN_API_KEY"):
        os.environ["LANGCHAIN_TRACING_V2"] = "false"
        return False

    os.environ.setdefault("LANGCHAIN_TRACING_V2", "true")
    os.environ.setdefault("LANGCHAIN_PROJECT", "issuelabel")
    return True

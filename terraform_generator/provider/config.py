"""
Provider configuration.

The configuration scopes ignore keys per resource, and names the language
subdirectory, the formatter command and an optional template directory.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

import yaml

from terraform_generator.exceptions import DescriptionError

DEFAULT_LANGUAGE_DIR: Final = "google"
DEFAULT_FORMATTER: Final = ("goimports", "-w")


@dataclass(frozen=True)
class ProviderConfig:
    """Settings for the Terraform provider generator."""

    ignore: dict[str, frozenset[str]] = field(default_factory=dict)
    language_dir: str = DEFAULT_LANGUAGE_DIR
    formatter: tuple[str, ...] = DEFAULT_FORMATTER
    template_dir: Path | None = None

    def ignore_for(self, resource_name: str) -> frozenset[str]:
        """Ignore keys configured for one resource."""
        return self.ignore.get(resource_name, frozenset())

    @classmethod
    def from_dict(cls, data: Any, base_dir: Path | None = None) -> "ProviderConfig":  # noqa: ANN401
        """Build a config from a decoded YAML document.

        Args:
            data: Mapping with optional ``ignore``, ``language_dir``,
                ``formatter`` and ``template_dir`` keys.
            base_dir: Directory a relative ``template_dir`` is resolved against.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            msg = "provider config: expected a mapping"
            raise DescriptionError(msg)

        ignore_data = data.get("ignore") or {}
        if not isinstance(ignore_data, dict):
            msg = "provider config: 'ignore' must map resource names to key lists"
            raise DescriptionError(msg)
        ignore = {}
        for resource_name, keys in ignore_data.items():
            if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
                msg = f"provider config: ignore keys for '{resource_name}' must be a list of strings"
                raise DescriptionError(msg)
            ignore[str(resource_name)] = frozenset(keys)

        formatter: tuple[str, ...] = DEFAULT_FORMATTER
        if "formatter" in data:
            raw_formatter = data["formatter"]
            if raw_formatter is None:
                formatter = ()
            elif isinstance(raw_formatter, list) and all(isinstance(part, str) for part in raw_formatter):
                formatter = tuple(raw_formatter)
            else:
                msg = "provider config: 'formatter' must be a list of strings or null"
                raise DescriptionError(msg)

        template_dir = data.get("template_dir")
        if template_dir is not None:
            template_dir = Path(template_dir)
            if base_dir is not None and not template_dir.is_absolute():
                template_dir = base_dir / template_dir

        return cls(
            ignore=ignore,
            language_dir=str(data.get("language_dir", DEFAULT_LANGUAGE_DIR)),
            formatter=formatter,
            template_dir=template_dir,
        )


def load_config(file_path: str | Path) -> ProviderConfig:
    """Load a provider configuration from a YAML file."""
    path = Path(file_path)
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return ProviderConfig.from_dict(data, base_dir=path.parent)

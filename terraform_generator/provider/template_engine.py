"""
Terraform Template Engine for Resource Generation

This module uses Jinja2 templates to generate Terraform provider resource
files and their reference documentation from API descriptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from terraform_generator.api.types import ApiDescription, Resource
from terraform_generator.provider.config import ProviderConfig
from terraform_generator.provider.context import ResourceContext, build_resource_context
from terraform_generator.provider.filters import FILTERS
from terraform_generator.provider.formatter import format_source
from terraform_generator.provider.properties import titlelize_property
from terraform_generator.utils.file_utils import write_files_to_disk
from terraform_generator.utils.string_case import titlecase

logger = logging.getLogger(__name__)

RESOURCE_TEMPLATE: Final = "resource.go.j2"
DOCUMENTATION_TEMPLATE: Final = "resource.html.markdown.j2"
DOCS_DIR: Final = Path("website", "docs", "r")


class TerraformTemplateEngine:
    """Template engine for generating Terraform resources."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine.

        A custom ``template_dir`` takes precedence; templates it does not
        provide fall back to the packaged ones.
        """
        default_dir = Path(__file__).parent.parent / "templates"
        search_path = [default_dir] if template_dir is None else [Path(template_dir), default_dir]

        self.template_dirs = search_path
        self.env = Environment(
            loader=FileSystemLoader([str(d) for d in search_path]),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._register_filters()

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters."""
        builtin_filters = {
            "title_case": titlecase,
            "titlelize": titlelize_property,
        }
        self.env.filters.update(builtin_filters)
        self.env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context."""
        template = self.env.get_template(template_name)
        return template.render(**context)


@dataclass(frozen=True)
class GeneratedResource:
    """The output of one resource: the shared context and the rendered files."""

    context: ResourceContext
    resource_file: Path
    doc_file: Path
    files: dict[Path, str]


class TerraformGenerator:
    """Main code generator for Terraform resources."""

    def __init__(
        self,
        config: ProviderConfig | None = None,
        template_engine: TerraformTemplateEngine | None = None,
    ) -> None:
        """Initialize the code generator."""
        self.config = config or ProviderConfig()
        self.template_engine = template_engine or TerraformTemplateEngine(self.config.template_dir)

    def resource_path(self, context: ResourceContext, output_dir: Path) -> Path:
        """Path of the Go resource file, under the configured language directory."""
        return Path(output_dir) / self.config.language_dir / context.resource_file_name

    def documentation_path(self, context: ResourceContext, output_dir: Path) -> Path:
        """Path of the Markdown reference page for the resource."""
        return Path(output_dir) / DOCS_DIR / context.doc_file_name

    def generate_resource(self, resource: Resource, output_dir: Path) -> GeneratedResource:
        """Render the resource file and its documentation from one context.

        Raises:
            UnmappedTypeError: If a property type has no schema type.
        """
        context = build_resource_context(resource, self.config)
        template_context = context.as_template_context()

        resource_file = self.resource_path(context, output_dir)
        doc_file = self.documentation_path(context, output_dir)
        files = {
            resource_file: self.template_engine.render_template(RESOURCE_TEMPLATE, template_context),
            doc_file: self.template_engine.render_template(DOCUMENTATION_TEMPLATE, template_context),
        }
        return GeneratedResource(
            context=context,
            resource_file=resource_file,
            doc_file=doc_file,
            files=files,
        )

    def generate_api(
        self,
        api: ApiDescription,
        output_dir: Path,
        resource_names: list[str] | None = None,
    ) -> list[GeneratedResource]:
        """Generate every resource (or the named ones) of an API description."""
        resources = api.resources
        if resource_names:
            resources = [api.resource(name) for name in resource_names]
        return [self.generate_resource(resource, output_dir) for resource in resources]

    def write_generated(self, generated: GeneratedResource) -> bool:
        """Write the files, then format the resource file (best effort).

        Returns:
            Whether the formatter succeeded. A failure is logged, not raised.
        """
        write_files_to_disk(generated.files)
        formatted = format_source(generated.resource_file, self.config.formatter)
        if formatted:
            logger.debug("Formatted %s", generated.resource_file)
        return formatted

#!/usr/bin/env python3
"""Command-line interface for the Terraform resource generator."""

import argparse
import json
import logging
import sys
import traceback
from dataclasses import replace
from pathlib import Path

import yaml
from jinja2 import TemplateError

from terraform_generator.api.loader import DescriptionLoader
from terraform_generator.exceptions import DescriptionError, GeneratorError
from terraform_generator.provider.config import ProviderConfig, load_config
from terraform_generator.provider.template_engine import GeneratedResource, TerraformGenerator
from terraform_generator.utils.file_utils import get_relative_path

logger = logging.getLogger(__name__)

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_FILE_NOT_FOUND = 1
EXIT_INVALID_DOCUMENT = 2
EXIT_GENERATION_ERROR = 3


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate Terraform resources and documentation from an API description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s compute/api.yaml
  %(prog)s compute/api.yaml --config compute/terraform.yaml --output ./build
  %(prog)s compute/api.yaml --resource Network --no-format --verbose
        """,
    )
    parser.add_argument(
        "api_file",
        type=Path,
        help="Path to the API description (YAML or JSON)",
        metavar="API_FILE",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Provider configuration file (YAML, optional)",
        dest="config_file",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("./generated"),
        help="Output root for generated files (default: %(default)s)",
        dest="output_dir",
    )
    parser.add_argument(
        "--template-dir",
        "-t",
        type=Path,
        help="Custom template directory (optional)",
        dest="template_dir",
    )
    parser.add_argument(
        "--resource",
        "-r",
        action="append",
        help="Only generate the named resource (repeatable)",
        dest="resources",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Do not run the source formatter on generated files",
        dest="no_format",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parsed_args = parser.parse_args(args)

    if not parsed_args.api_file.exists():
        parser.error(f"API description not found: {parsed_args.api_file}")
    if parsed_args.config_file is not None and not parsed_args.config_file.exists():
        parser.error(f"Provider config not found: {parsed_args.config_file}")

    return parsed_args


def configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_config(parsed_args: argparse.Namespace) -> ProviderConfig:
    """Load the provider config and apply command line overrides."""
    config = load_config(parsed_args.config_file) if parsed_args.config_file else ProviderConfig()
    overrides: dict[str, object] = {}
    if parsed_args.template_dir is not None:
        overrides["template_dir"] = parsed_args.template_dir
    if parsed_args.no_format:
        overrides["formatter"] = ()
    return replace(config, **overrides) if overrides else config


def print_generation_summary(*, generated: list[GeneratedResource], output_dir: Path) -> None:
    """Print summary of generated files."""
    file_count = sum(len(g.files) for g in generated)
    print(f"Generated {file_count} files:")
    for item in generated:
        for file_path in sorted(item.files):
            print(f"  {get_relative_path(file_path, output_dir)}")
    print(f"\nTerraform resources generated successfully in {output_dir}")


def main(args: list[str] | None = None) -> int:
    """Generate Terraform resources from an API description."""
    parsed_args = parse_command_line_args(args)
    configure_logging(verbose=parsed_args.verbose)

    try:
        api = DescriptionLoader().parse_file(parsed_args.api_file)
        config = build_config(parsed_args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except (json.JSONDecodeError, yaml.YAMLError, DescriptionError) as e:
        print(f"Error: Invalid document: {e}", file=sys.stderr)
        return EXIT_INVALID_DOCUMENT

    try:
        resources = [api.resource(name) for name in parsed_args.resources] if parsed_args.resources else api.resources
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return EXIT_INVALID_DOCUMENT

    generator = TerraformGenerator(config)
    generated: list[GeneratedResource] = []
    failed: list[str] = []

    for resource in resources:
        try:
            item = generator.generate_resource(resource, parsed_args.output_dir)
            generator.write_generated(item)
        except (GeneratorError, TemplateError, OSError) as e:
            logger.error("Skipping %s: %s", resource.name, e)  # noqa: TRY400
            if parsed_args.verbose:
                traceback.print_exc()
            failed.append(resource.name)
            continue
        generated.append(item)

    if parsed_args.verbose:
        print_generation_summary(generated=generated, output_dir=parsed_args.output_dir)
    elif generated:
        print(f"Terraform resources generated successfully in {parsed_args.output_dir}")

    if failed:
        print(f"Error: generation failed for: {', '.join(failed)}", file=sys.stderr)
        return EXIT_GENERATION_ERROR
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

"""Exceptions raised by the Terraform resource generator."""


class GeneratorError(Exception):
    """Base exception for generator errors."""


class DescriptionError(GeneratorError, ValueError):
    """An API description or provider config document has the wrong shape."""


class UnmappedTypeError(GeneratorError, TypeError):
    """A property type has no Terraform schema type.

    Generation of the affected resource must stop; there is no fallback type.
    """

    def __init__(self, property_type: object, property_name: str | None = None) -> None:
        self.property_type = property_type
        self.property_name = property_name
        msg = f"No Terraform schema type for property type {property_type!r}"
        if property_name:
            msg = f"{msg} (property '{property_name}')"
        super().__init__(msg)


class MalformedUrlTemplateError(GeneratorError, ValueError):
    """A URL template does not follow the ``{{identifier}}`` marker syntax."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Malformed URL template {template!r}: {reason}")

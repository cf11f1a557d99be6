"""Update and replacement semantics of resources and their properties."""

from collections.abc import Iterable

from terraform_generator.api.types import Property, Resource


def updatable(resource: Resource, properties: Iterable[Property]) -> bool:
    """Whether the resource can be changed without being recreated.

    A resource that is not ``input`` is always updatable; an ``input`` resource
    is updatable only through properties with their own update endpoint.
    """
    return not resource.input or any(p.update_url is not None for p in properties)


def force_new(prop: Property, resource: Resource) -> bool:
    """Whether changing the property forces the resource to be recreated.

    Args:
        prop: The property being changed.
        resource: The resource the property belongs to.

    Returns:
        False for output properties; otherwise True if the property is an
        input, or if the resource is an input and the property has no
        update endpoint of its own.
    """
    return not prop.output and (prop.input or (resource.input and prop.update_url is None))

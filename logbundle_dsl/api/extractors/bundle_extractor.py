"""Convert a validated definition model into generator descriptors."""

from typing import List

from logbundle_dsl.api.extractors.type_resolver import TypeResolver
from logbundle_dsl.lib.descriptors import (
    BundleDescriptor,
    GetLoggerAnnotation,
    InterfaceDefinition,
    LogAnnotation,
    MessageAnnotation,
    MethodDescriptor,
    Parameter,
)


def get_bundle_interfaces(model) -> List[InterfaceDefinition]:
    """All interfaces carrying a logBundle block, in file order."""
    resolver = TypeResolver(model)
    return [extract_interface(model, iface, resolver) for iface in model.bundles]


def extract_interface(model, iface, resolver: TypeResolver = None) -> InterfaceDefinition:
    resolver = resolver or TypeResolver(model)
    qualified = f"{model.package}.{iface.name}" if model.package else iface.name

    bundle = BundleDescriptor(
        project_code=iface.log_bundle.project_code,
        interface_name=qualified,
        package=model.package or "",
    )
    methods = tuple(extract_method(method, resolver) for method in iface.methods)
    return InterfaceDefinition(bundle=bundle, methods=methods)


def extract_method(method, resolver: TypeResolver) -> MethodDescriptor:
    annotations = []
    if method.message is not None:
        annotations.append(MessageAnnotation(method.message.id, method.message.value))
    if method.log_message is not None:
        log = method.log_message
        annotations.append(LogAnnotation(log.id, log.value, log.level))
    if method.get_logger:
        annotations.append(GetLoggerAnnotation())

    return MethodDescriptor(
        name=method.name,
        return_type=resolver.resolve(method.returns),
        parameters=tuple(Parameter(p.name, resolver.resolve(p.type)) for p in method.parameters),
        annotations=tuple(annotations),
    )

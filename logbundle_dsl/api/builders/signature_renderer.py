"""Parameter-list and call-list synthesis for generated methods."""

from dataclasses import dataclass
from typing import Callable, Optional

from logbundle_dsl.api.builders.type_classifier import is_exception_type
from logbundle_dsl.api.errors import MultipleExceptionParametersError
from logbundle_dsl.lib.descriptors import MethodDescriptor, Parameter


@dataclass(frozen=True)
class RenderedSignature:
    """
    declaration: "java.lang.String name, java.lang.Throwable cause"
    call_list:   "name,cause"
    exception_parameter: the first exception-typed parameter, if tracked
    """
    declaration: str
    call_list: str
    exception_parameter: Optional[Parameter] = None

    @property
    def has_parameters(self) -> bool:
        return bool(self.call_list)


def render_signature(
    method: MethodDescriptor,
    track_exceptions: bool = False,
    template: str = None,
    trace: Optional[Callable[[str], None]] = None,
) -> RenderedSignature:
    """
    Build the declaration and call-argument text in one left-to-right pass.

    Args:
        method: Method whose parameters are rendered, in declaration order.
        track_exceptions: Classify each parameter type and remember the
            exception-typed one (message methods chain it as the cause).
        template: Message template, only used to describe errors.
        trace: Optional debug callback forwarded to the type classifier.

    Raises:
        MultipleExceptionParametersError: more than one exception-typed
            parameter while tracking exceptions.
    """
    declaration = []
    call_list = []
    exception_parameter = None

    for parameter in method.parameters:
        declaration.append(f"{parameter.type} {parameter.name}")
        call_list.append(parameter.name)

        if not track_exceptions:
            continue

        if trace:
            trace(f'... checking if parameter "{parameter.type} {parameter.name}" is an exception')
        if is_exception_type(parameter.type, trace=trace):
            if exception_parameter is not None:
                raise MultipleExceptionParametersError(method.name, template)
            exception_parameter = parameter

    return RenderedSignature(
        declaration=", ".join(declaration),
        call_list=",".join(call_list),
        exception_parameter=exception_parameter,
    )

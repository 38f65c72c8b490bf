"""
Interface-level validation.

Checks that are independent of generation order. Message-id collisions and
multiple annotations on one method are deliberately NOT checked here: they are
fatal generation errors reported by the generator itself.
"""

from logbundle_dsl.validation.errors import ModelValidationError


def verify_unique_interface_names(model):
    seen = set()
    for idx, iface in enumerate(model.interfaces):
        if iface.name in seen:
            raise ModelValidationError(
                f"Interface with name '{iface.name}' already exists.",
                location=f"interfaces.{idx}",
            )
        seen.add(iface.name)


def verify_methods(model):
    """
    Per-method shape checks.

    Rules:
    1) Parameter names are unique within a method
    2) A getLogger method declares no parameters
    3) A message method declares a non-void return type
    4) A logMessage-only method returns void
    5) A bundle's project code is not blank
    """
    for i_idx, iface in enumerate(model.interfaces):
        if iface.log_bundle is not None and not iface.log_bundle.project_code.strip():
            raise ModelValidationError(
                f"Interface '{iface.name}' has an empty projectCode.",
                location=f"interfaces.{i_idx}.logBundle.projectCode",
            )

        for m_idx, method in enumerate(iface.methods):
            where = f"interfaces.{i_idx}.methods.{m_idx}"

            names = [p.name for p in method.parameters]
            duplicates = sorted({n for n in names if names.count(n) > 1})
            if duplicates:
                raise ModelValidationError(
                    f"Method '{iface.name}.{method.name}' declares parameter(s) {duplicates} more than once.",
                    location=f"{where}.parameters",
                )

            if method.get_logger and method.parameters:
                raise ModelValidationError(
                    f"getLogger method '{iface.name}.{method.name}' must not declare parameters.",
                    location=f"{where}.parameters",
                )

            if method.message is not None and method.returns == "void":
                raise ModelValidationError(
                    f"Message method '{iface.name}.{method.name}' must declare a return type "
                    f"(String or a Throwable to construct).",
                    location=f"{where}.returns",
                )

            if method.log_message is not None and method.annotation_count == 1 and method.returns != "void":
                raise ModelValidationError(
                    f"logMessage method '{iface.name}.{method.name}' must return void, not '{method.returns}'.",
                    location=f"{where}.returns",
                )

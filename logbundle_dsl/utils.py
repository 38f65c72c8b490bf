from logbundle_dsl.api.extractors import TypeResolver


def print_model_debug(model):
    resolver = TypeResolver(model)

    def _annotation(method):
        if method.message is not None:
            return f"@Message id={method.message.id} value={method.message.value!r}"
        if method.log_message is not None:
            log = method.log_message
            return f"@LogMessage id={log.id} level={log.level.value} value={log.value!r}"
        if method.get_logger:
            return "@GetLogger"
        return "(not annotated)"

    # -------- aggregates --------
    bundles = model.bundles
    method_count = sum(len(i.methods) for i in bundles)

    print("=== SUMMARY ===")
    print(f"Package: {model.package or '(default)'}")
    print(f"Interfaces: {len(model.interfaces)} | Bundles: {len(bundles)} | Methods: {method_count}")
    print(f"Declared types: {len(model.types)} | Imports: {len(model.imports)}\n")

    if model.types:
        print("=== TYPES ===")
        for decl in model.types:
            extends = f" extends {resolver.qualify(decl.extends)}" if decl.extends else ""
            print(f"- {decl.name}{extends}")
        print()

    for iface in model.interfaces:
        bundle = iface.log_bundle
        header = f" (projectCode={bundle.project_code})" if bundle else " (no logBundle, not generated)"
        print(f"=== INTERFACE {iface.name}{header} ===")
        if not iface.methods:
            print("    (no methods)")
        for method in iface.methods:
            params = ", ".join(f"{resolver.qualify(p.type)} {p.name}" for p in method.parameters)
            returns = resolver.qualify(method.returns)
            print(f"- {returns} {method.name}({params})")
            print(f"    • {_annotation(method)}")
            if method.annotation_count > 1:
                print("    • WARNING: more than one generation annotation")
        print()

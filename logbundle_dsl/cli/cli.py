from pathlib import Path

import click

from datetime import date
from rich import pretty
from rich.console import Console

from logbundle_dsl.api.config import GeneratorSettings
from logbundle_dsl.api.diagnostics import DiagnosticChannel
from logbundle_dsl.api.gen_logging import configure_gen_logging
from logbundle_dsl.api.generator import render_bundle_files
from logbundle_dsl.language import build_model
from logbundle_dsl.utils import print_model_debug

pretty.install()
console = Console()


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


@click.group()
@click.pass_context
def cli(context):
    context.ensure_object(dict)


@cli.command("validate", help="Definition file validation")
@click.pass_context
@click.argument("model_path")
def validate(context, model_path):
    try:
        _ = build_model(model_path)
        console.print(f"{_stamp()} Model validation success!", style="green")
    except Exception as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Load and print a summary of the bundles (methods, ids, levels).")
@click.pass_context
@click.argument("model_path")
def inspect_cmd(context, model_path):
    try:
        model = build_model(model_path)
        console.print(f"{_stamp()} Model validation success!", style="green")
        print_model_debug(model)
    except Exception as e:
        console.print(f"{_stamp()} Inspect failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("generate", help="Emit one <Interface>_impl.java per log bundle interface.")
@click.pass_context
@click.argument("model_path")
@click.option("--out", "out_dir", default="generated", help="Output directory (default: ./generated)")
@click.option("--keep-going", is_flag=True, default=False, help="Continue with the next interface after a failure.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Per-method trace output.")
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only print warnings and errors.")
def generate(context, model_path, out_dir, keep_going, verbose, quiet):
    settings = GeneratorSettings(DEBUG=True) if verbose else GeneratorSettings()
    configure_gen_logging(settings, quiet=quiet)

    diagnostics = DiagnosticChannel()
    try:
        model = build_model(model_path)
        out_path = Path(out_dir).resolve()
        report = render_bundle_files(
            model, out_path, settings=settings, keep_going=keep_going, diagnostics=diagnostics
        )
    except Exception as e:
        console.print(f"{_stamp()} Generate failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        for diagnostic in diagnostics:
            console.print(f"{_stamp()} {diagnostic}", style="red")

        if not report.ok:
            console.print(
                f"{_stamp()} Generate failed for {len(report.failures)} interface(s); "
                f"{len(report.generated)} generated.",
                style="red",
            )
            context.exit(1)

        console.print(f"{_stamp()} {len(report.generated)} log bundle(s) emitted to: {out_path}", style="green")
        context.exit(0)


def main():
    cli()


if __name__ == "__main__":
    main()

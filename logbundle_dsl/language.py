"""
Core model builders for bundle-definition files.

This module provides the main entry points for loading and validating
definition files. Per-object checks are pydantic validators in lib/model.py;
model-wide validation lives in the validation/ package.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from logbundle_dsl.api.gen_logging import get_logger
from logbundle_dsl.lib.model import BundleFileSpec
from logbundle_dsl.validation import (
    ModelValidationError,
    verify_unique_type_declarations,
    verify_type_hierarchy,
    verify_unique_interface_names,
    verify_methods,
)

logger = get_logger(__name__)


# ------------------------------------------------------------------------------
# Public model builders

def build_model(model_path) -> BundleFileSpec:
    """Load & validate a model from a file path, merging included files."""
    model_file = Path(model_path).resolve()
    data = _expand_includes(model_file)
    return _build(data, filename=str(model_file))


def build_model_str(model_str: str, base_dir=None) -> BundleFileSpec:
    """
    Load & validate a model from a string.

    Args:
        model_str: YAML document.
        base_dir: Directory used to resolve `include` entries (defaults to cwd).
    """
    data = _load_yaml(model_str)
    data = _merge_includes(data, Path(base_dir or ".").resolve(), visited=set())
    return _build(data)


# ------------------------------------------------------------------------------
# Model-wide validation (runs after the schema is validated)

def model_processor(model):
    """
    Cross-object validation.
    Order matters: types -> hierarchy -> interfaces -> methods
    """
    verify_unique_type_declarations(model)
    verify_type_hierarchy(model)
    verify_unique_interface_names(model)
    verify_methods(model)


def _build(data, filename: str = None) -> BundleFileSpec:
    try:
        model = BundleFileSpec.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(p) for p in first["loc"])
        raise ModelValidationError(first["msg"], location=location, filename=filename) from e

    try:
        model_processor(model)
    except ModelValidationError as e:
        e.filename = filename
        raise

    logger.debug(
        f"[MODEL] {len(model.interfaces)} interface(s), {len(model.bundles)} bundle(s), "
        f"{len(model.types)} type declaration(s)"
    )
    return model


# ------------------------------------------------------------------------------
# Includes

def _load_yaml(content: str, filename: str = None) -> dict:
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ModelValidationError(f"Invalid YAML: {e}", filename=filename) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ModelValidationError(
            "A definition file must be a mapping at the top level.", filename=filename
        )
    return data


def _expand_includes(model_file: Path, visited=None) -> dict:
    """
    Recursively load a definition file and merge the `imports` and `types`
    of every file it includes. Included declarations come first, so a file
    can extend types declared by the files it includes.
    """
    if visited is None:
        visited = set()

    # Prevent circular includes
    if model_file in visited:
        return {}
    visited.add(model_file)

    if not model_file.exists():
        raise FileNotFoundError(f"File not found: {model_file}")

    data = _load_yaml(model_file.read_text(encoding="utf-8"), filename=str(model_file))
    return _merge_includes(data, model_file.parent, visited)


def _merge_includes(data: dict, base_dir: Path, visited: set) -> dict:
    includes = data.get("include") or []
    if not includes:
        return data

    imports, types = [], []
    for rel_path in includes:
        include_path = (base_dir / rel_path).resolve()
        if not include_path.exists():
            raise ModelValidationError(f"Include not found: {include_path}", location="include")

        logger.debug(f"[INCLUDE] Merging {include_path.name}")
        included = _expand_includes(include_path, visited)
        imports.extend(included.get("imports") or [])
        types.extend(included.get("types") or [])

    merged = dict(data)
    merged["imports"] = imports + list(data.get("imports") or [])
    merged["types"] = types + list(data.get("types") or [])
    return merged

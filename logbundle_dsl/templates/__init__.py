from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined

# Java sources: no HTML escaping, exact whitespace control
env = Environment(
    loader=FileSystemLoader(Path(__file__).parent),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
    autoescape=False,
)

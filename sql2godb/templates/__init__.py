from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

GO_TEMPLATES_DIR = Path(__file__).parent / "go"


def _call_args(args) -> str:
    """Bound arguments -> `ctx, q, a, b` for a pgx call."""
    return ", ".join(["ctx", "q"] + list(args))


env = Environment(
    loader=FileSystemLoader(str(GO_TEMPLATES_DIR)),
    autoescape=select_autoescape(disabled_extensions=("jinja",)),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)

env.filters["call_args"] = _call_args


def render_template(name: str, **context) -> str:
    return env.get_template(name).render(**context)

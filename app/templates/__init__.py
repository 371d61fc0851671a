"""Template rendering utilities."""

from deps import Path, html

TEMPLATES_DIR = Path(__file__).parent


def load_template(name: str) -> str:
    """Load a template file."""
    path = TEMPLATES_DIR / name
    return path.read_text(encoding="utf-8")


def load_css() -> str:
    """Load the CSS file."""
    return load_template("styles.css")


def render_template(template_name: str, **kwargs) -> str:
    """Render a template inside base.html.

    Placeholders are ``{name}`` and are filled by plain string replacement,
    so CSS and script braces in the templates need no escaping.
    """
    content = load_template(template_name)
    for key, value in kwargs.items():
        content = content.replace("{" + key + "}", str(value))
    title_val = html.escape(str(kwargs.get("title", "FeatureFence")))
    base = load_template("base.html")
    return base.replace("{title}", title_val).replace("{css}", load_css()).replace("{content}", content)


def render_playground(app_name: str, default_targets: str) -> str:
    """Render the API playground page."""
    return render_template(
        "playground.html",
        title=f"{app_name} – Playground",
        app_name=html.escape(app_name),
        default_targets=html.escape(default_targets, quote=True),
    )

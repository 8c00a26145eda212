"""Allow ``python -m gdpr_sanitizer``."""

from gdpr_sanitizer.cli.main import app

app()

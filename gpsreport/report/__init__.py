"""Report writers for collected GPS records."""

from .writer import (
    CSV_HEADER,
    derive_html_path,
    render_html,
    write_csv,
    write_html,
)

__all__ = ["CSV_HEADER", "derive_html_path", "render_html", "write_csv", "write_html"]

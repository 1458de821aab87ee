"""CSV and HTML report writers."""

import csv
import logging
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from ..exceptions import ReportWriteError
from ..processing.models import GpsRecord

logger = logging.getLogger(__name__)

CSV_HEADER = ("path", "latitude", "longitude")
HTML_TEMPLATE = "report.html"
TEMPLATE_DIR = Path(__file__).parent / "templates"


def derive_html_path(csv_path: str) -> str:
    """Derive the HTML report path from the CSV report path.

    A trailing literal ".csv" is replaced by ".html"; any other name just
    gets ".html" appended.

    Examples:
        >>> derive_html_path("foo.csv")
        'foo.html'
        >>> derive_html_path("report")
        'report.html'
        >>> derive_html_path("data.CSV")
        'data.CSV.html'
    """
    base = csv_path[:-len(".csv")] if csv_path.endswith(".csv") else csv_path
    return base + ".html"


def write_csv(records: Sequence[GpsRecord], path: str) -> int:
    """Write records to a CSV file with a ``path,latitude,longitude`` header.

    A row that cannot be written is logged and skipped. The file is closed
    before this function returns.

    Args:
        records: Records in output order
        path: CSV file path

    Returns:
        Number of data rows written

    Raises:
        ReportWriteError: If the file cannot be created or written
    """
    try:
        f = open(path, "w", newline="", encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(path, f"failed to create CSV file: {e}") from e

    written = 0
    try:
        with f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for record in records:
                try:
                    writer.writerow(record.as_row())
                except (csv.Error, UnicodeError) as e:
                    logger.warning(f"failed to write CSV row for file {record.path}: {e}")
                    continue
                written += 1
    except OSError as e:
        raise ReportWriteError(path, f"failed to write CSV file: {e}") from e

    logger.debug(f"Wrote {written} row(s) to {path}")
    return written


@lru_cache(maxsize=None)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
    )


def render_html(records: Sequence[GpsRecord]) -> str:
    """Render records into the HTML report.

    Paths and coordinates go through Jinja2's autoescaping, so quotes in
    file names cannot break out of the ``src`` attribute.
    """
    template = _environment().get_template(HTML_TEMPLATE)
    return template.render(records=records)


def write_html(records: Sequence[GpsRecord], path: str) -> str:
    """Render records and write the HTML report.

    A record whose fields cannot be encoded as UTF-8 is logged and left
    out; the remaining rows are still rendered.

    Args:
        records: Records in output order
        path: HTML file path

    Returns:
        The path written

    Raises:
        ReportWriteError: If rendering or writing fails
    """
    printable = []
    for record in records:
        try:
            "".join(record.as_row()).encode("utf-8")
        except UnicodeError as e:
            logger.warning(f"failed to write HTML row for file {record.path!r}: {e}")
            continue
        printable.append(record)

    try:
        content = render_html(printable).encode("utf-8")
    except (TemplateError, UnicodeError) as e:
        raise ReportWriteError(path, f"failed to render HTML: {e}") from e

    try:
        Path(path).write_bytes(content)
    except OSError as e:
        raise ReportWriteError(path, f"failed to write HTML: {e}") from e

    logger.debug(f"Wrote HTML report with {len(printable)} row(s) to {path}")
    return path

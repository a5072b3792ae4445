"""HTML rendering for the status page."""

from html import escape

from status.domain.value_objects import StatusReport

_PAGE_TEMPLATE = """<html>
  <head>
  </head>
  <body>
    <h2>Redis Connection Test</h2>
    <p>Connecting to Redis at: {cache_host}</p>
    <p>Value of key just read: {cache_value}</p>
    <hr>
    <h2>Cloud SQL Connection Test</h2>
    <p>Database table names: {table_names}</p>
  </body>
</html>
"""

_PLACEHOLDER_TEMPLATE = '<em style="color:red;">{text}</em>'


def render_status_page(report: StatusReport) -> str:
    """Render a report as a standalone HTML page.

    Values coming from the stores are escaped.
    """
    if report.database_connected:
        table_names = escape(report.table_names_display())
    else:
        table_names = _PLACEHOLDER_TEMPLATE.format(
            text=escape(report.table_names_display())
        )

    return _PAGE_TEMPLATE.format(
        cache_host=escape(report.cache_host),
        cache_value=escape(str(report.cache_value)),
        table_names=table_names,
    )

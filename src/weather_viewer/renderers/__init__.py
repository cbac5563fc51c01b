"""Pure rendering functions: samples -> HTML/SVG strings.

All renderers follow the same pattern:
  - Input: samples, summaries or dataclasses (from analysis/ or datasources/)
  - Output: str (SVG document or HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/ which fetch the data and write the rendered site.

Public API:
  - palette: color_for_temperature
  - bar_chart: build_temperature_bar_svg
  - line_chart: build_line_chart_svg
  - current: build_current_html, current_summary
  - page: Chart, build_metric_charts, build_current_tab_html,
          build_statistics_tab_html, build_page_html
  - weather_utils: METRICS, tick_format_for

Adding a chart
--------------
1. Create ``renderers/{name}.py`` with a build function::

       from weather_viewer.renderers import render_template

       def build_mychart_svg(samples: list[WeatherSample]) -> str:
           # Compute SVG geometry in Python, keep the template dumb
           return render_template("mychart.svg.j2", points=...)

2. Create a Jinja2 template in ``templates/{name}.svg.j2``.
   Chart templates produce standalone ``<svg>`` documents so the same
   output can be inlined in the page and saved as a file.

3. Wire into a flow in ``flows/`` and add tests that assert the
   returned markup contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


NO_DATA_HTML = '<p class="no-data">No data to display.</p>'

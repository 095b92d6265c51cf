"""Results export utilities.

Example:
    >>> from iso_configurator.results import ResultsExporter
    >>>
    >>> exporter = ResultsExporter(store)
    >>> exporter.export_to_excel(result, "./exports/configuration.xlsx")
"""

from .exporter import (
    ResultsExporter,
    format_dryer_component,
    format_component_chain,
)

__all__ = [
    'ResultsExporter',
    'format_dryer_component',
    'format_component_chain',
]

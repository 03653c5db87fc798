"""Template listing and script generation.

Provides:
- Parsing of the scaffolding tool's template table
- Bulk generation of one executable script per template
"""

from scriptisto_harness.scaffold.generator import (
    GenerationReport,
    ScriptGenerator,
    list_templates,
    make_executable,
    render_template,
)
from scriptisto_harness.scaffold.templates import (
    TemplateDescriptor,
    parse_template_row,
    parse_template_table,
)

__all__ = [
    "GenerationReport",
    "ScriptGenerator",
    "TemplateDescriptor",
    "list_templates",
    "make_executable",
    "parse_template_row",
    "parse_template_table",
    "render_template",
]

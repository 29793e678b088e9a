"""
VITAE - Curriculum vitae rendering from JSON content and style

Renders a personal-data document into a styled, paginated PDF from two JSON
inputs (content and visual style) and an HTML template.

Architecture:
- Styling Context: Style normalization and print stylesheet compilation
- Templating Context: JSON loading, HTML templates and rich-text sanitization
- Rendering Context: HTML to PDF rendering and run orchestration
"""

__version__ = "0.1.0"

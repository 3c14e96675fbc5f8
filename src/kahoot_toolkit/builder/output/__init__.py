"""
Module: builder.output

Purpose:
    Document rendering for the builder. Converts a QuestionCollection to
    DOCX (python-docx) or PDF (ReportLab).

Key Functions:
    - render_document(): Render to a python-docx Document
    - write_document(): Save a Document to .docx
    - render_pdf(): Render to a .pdf file

Dependencies:
    - python-docx: DOCX generation
    - reportlab: PDF generation

Used By:
    - builder.controller: Conversion pipeline
"""

from .docx_renderer import render_document, write_document
from .pdf_renderer import render_pdf

__all__ = [
    "render_document",
    "write_document",
    "render_pdf",
]

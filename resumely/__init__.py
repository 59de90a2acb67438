"""
Resumely - resume rendering backend

Turns stored resume records into downloadable single-page PDF documents.

Architecture:
- Records Context: Resume record data structures and loading
- Rendering Context: Normalization, layout, and PDF serialization
"""

__version__ = "0.1.0"

"""
ResumeForge PDF
Resume layout engine and PDF rendering service
"""

__version__ = "1.0.0"

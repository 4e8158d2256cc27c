"""
Exceptions raised by the resume rendering pipeline
"""


class ResumeRenderError(RuntimeError):
    """Fatal rendering backend failure; no partial document is produced"""


class FontEmbeddingError(ResumeRenderError):
    """A font face could not be loaded or embedded"""

    def __init__(self, font_name: str, reason: str = ""):
        self.font_name = font_name
        message = f"Could not embed font '{font_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

"""
Custom exceptions for PDF Generator.

This module defines all custom exceptions used throughout the library.
"""


class PDFGeneratorException(Exception):
    """Base exception for all PDF Generator errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF generator error occurred."


class UsageError(PDFGeneratorException):
    """Raised when the command line invocation is malformed."""

    @property
    def default_message(self) -> str:
        return "Invalid command line usage."


class InvalidPageCountError(UsageError):
    """Raised when the number of pages is not a positive integer."""

    @property
    def default_message(self) -> str:
        return "Invalid number of pages provided."


class InvalidTargetSizeError(UsageError):
    """Raised when the target file size is not a number."""

    @property
    def default_message(self) -> str:
        return "Invalid file size provided."


class StreamOpenError(PDFGeneratorException):
    """Raised when the output stream cannot be opened."""

    @property
    def default_message(self) -> str:
        return "Unable to open the output stream."


class StreamWriteError(PDFGeneratorException):
    """Raised when writing the document stream fails."""

    @property
    def default_message(self) -> str:
        return "Failed to write the PDF document stream."


class PaddingIOError(PDFGeneratorException):
    """Raised when padding the generated file fails."""

    @property
    def default_message(self) -> str:
        return "Failed to pad the generated PDF file."


class DocumentStateError(PDFGeneratorException):
    """Raised when the authoring or completion protocol is used out of order."""

    @property
    def default_message(self) -> str:
        return "Document is not in a valid state for this operation."

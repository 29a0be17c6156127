"""Custom exceptions for cellquill."""

from typing import Optional


class CellQuillError(Exception):
    """Base exception for cellquill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(CellQuillError):
    """Exception raised when an HTML fragment cannot be parsed."""

    def __init__(self, message: str, details: Optional[str] = None,
                 line_number: Optional[int] = None, column_number: Optional[int] = None):
        super().__init__(message, details)
        self.line_number = line_number
        self.column_number = column_number


class ExportError(CellQuillError):
    """Exception raised while writing rich text into a workbook."""

    pass

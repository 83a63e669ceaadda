"""Custom exceptions for clireport operations"""


class ReportError(Exception):
    """Base exception for report rendering operations"""
    pass


class ConfigurationError(ReportError):
    """Invalid options, values or settings supplied to a render operation"""
    pass


class FileNotFoundError(ReportError):
    """Missing settings or report document files"""
    pass

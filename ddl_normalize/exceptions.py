"""Exceptions raised by ddl-normalize."""


class DDLNormalizeError(Exception):
    """
    Base exception for all ddl-normalize errors
    """
    pass


class ParseError(DDLNormalizeError):
    """
    Raised when SQL text cannot be read into tables
    """
    pass


class UnsupportedTypeError(ParseError):
    """
    Raised when a column uses a data type outside the known set
    """

    def __init__(self, column: str, type_name: str):
        super().__init__(f"Unsupported type {type_name!r} for column {column!r}")
        self.column = column
        self.type_name = type_name

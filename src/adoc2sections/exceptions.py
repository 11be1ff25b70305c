"""Custom exceptions for adoc2sections."""


class Adoc2sectionsError(Exception):
    """Base exception for adoc2sections operations."""


class FlattenError(Adoc2sectionsError):
    """A section tree could not be flattened into records."""


class InvalidLevelError(FlattenError):
    """Section level is not a whole number in the supported range."""

    def __init__(self, level: object, *, section_id: str | None = None) -> None:
        self.level = level
        self.section_id = section_id
        where = f" for section {section_id!r}" if section_id else ""
        super().__init__(f"Invalid section level {level!r}{where}")


class MalformedSectionError(FlattenError):
    """Section node is missing a required field."""


class ParseError(Adoc2sectionsError):
    """Error during HTML parsing."""


class ConversionError(Adoc2sectionsError):
    """Error during AsciiDoc to HTML conversion."""


class IndexingError(Adoc2sectionsError):
    """Error while pushing records to the search index."""

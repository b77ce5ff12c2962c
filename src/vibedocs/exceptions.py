"""Custom exceptions for vibedocs."""


class VibedocsError(Exception):
    """Base exception for vibedocs operations."""


class ContentError(VibedocsError):
    """Error while reading the documentation corpus."""


class CorpusNotFoundError(ContentError):
    """The docs root directory does not exist."""


class SectionNotFoundError(ContentError):
    """No section matches the requested slug."""


class DocumentNotFoundError(ContentError):
    """No document matches the requested slug."""


class FrontMatterError(ContentError):
    """Frontmatter is not valid YAML or not a mapping."""


class UnreadableDocumentError(ContentError):
    """A markdown file could not be read or is not valid UTF-8."""


class RenderError(VibedocsError):
    """Error while rendering markdown to HTML."""


class InvalidSlugError(VibedocsError, ValueError):
    """Slug contains characters that could escape the docs root."""

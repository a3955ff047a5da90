"""Custom exceptions for html2richtext."""


class Html2RichTextError(Exception):
    """Base exception for html2richtext operations."""


class InvalidHtmlError(Html2RichTextError):
    """Input HTML is empty, malformed, or could not be sanitized."""


class ConversionError(Html2RichTextError):
    """Error while converting the DOM into a rich text document."""


class JsonEncodingError(Html2RichTextError):
    """The document could not be encoded as valid JSON."""

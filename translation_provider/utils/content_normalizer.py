"""
Textual rewrites applied to translation files on their way to and from
the server. Plain byte substring operations, not XML processing; file
content is never decoded, so any encoding passes through.
"""
from typing import Union


class ContentNormalizer:
    """
    Upload/download transforms for XLIFF file content.

    Each transform is a no-op when its marker is absent.
    """

    UTF8_BOM = b'\xef\xbb\xbf'

    TRANS_UNIT_TAG = b'<trans-unit'
    TRANS_UNIT_PRESERVE = b'<trans-unit xml:space="preserve"'

    XLIFF_V11_HEADER = b'<xliff xmlns="urn:oasis:names:tc:xliff:document:1.1" version="1.1">'
    XLIFF_V12_HEADER = b'<xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" version="1.2">'

    @staticmethod
    def to_bytes(content: Union[bytes, str]) -> bytes:
        """Encode text as UTF-8; bytes are returned unchanged."""
        if isinstance(content, str):
            return content.encode('utf-8')
        return content

    @staticmethod
    def preserve_whitespace(content: bytes) -> bytes:
        """
        Mark every translation unit as whitespace-preserving.

        Args:
            content: Raw file content

        Returns:
            Content with ``xml:space="preserve"`` injected into each unit tag
        """
        return content.replace(
            ContentNormalizer.TRANS_UNIT_TAG,
            ContentNormalizer.TRANS_UNIT_PRESERVE
        )

    @staticmethod
    def remove_bom(data: bytes) -> bytes:
        """Strip a leading UTF-8 byte order mark."""
        if data.startswith(ContentNormalizer.UTF8_BOM):
            return data[len(ContentNormalizer.UTF8_BOM):]
        return data

    @staticmethod
    def force_v12(content: bytes) -> bytes:
        """Rewrite an XLIFF 1.1 root element to 1.2."""
        return content.replace(
            ContentNormalizer.XLIFF_V11_HEADER,
            ContentNormalizer.XLIFF_V12_HEADER
        )


def prepare_upload(content: Union[bytes, str]) -> bytes:
    """Transform file content before it is sent to the server."""
    return ContentNormalizer.preserve_whitespace(ContentNormalizer.to_bytes(content))


def normalize_download(data: Union[bytes, str]) -> bytes:
    """
    Transform downloaded file content.

    Args:
        data: Raw response body

    Returns:
        Content without BOM, XLIFF header forced to 1.2
    """
    data = ContentNormalizer.remove_bom(ContentNormalizer.to_bytes(data))
    return ContentNormalizer.force_v12(data)

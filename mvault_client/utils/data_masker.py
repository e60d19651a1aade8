"""
Data masker utility for client-side sensitive data protection.

Masks credentials, tokens and similar values before request details are
written to debug logs.
"""

import re
from typing import Any, Set


class DataMasker:
    """Static class for masking sensitive data."""

    MASKED_VALUE = "***MASKED***"

    # Set of sensitive field names (normalized)
    _sensitive_fields: Set[str] = {
        "password",
        "secret",
        "token",
        "key",
        "auth",
        "authorization",
        "cookie",
        "session",
        "apikey",
        "accesstoken",
        "refreshtoken",
    }

    # Path segments following these markers carry secrets, e.g. "filter/token/<token>"
    _path_pattern = re.compile(r"(/token/)([^/?]+)")

    @classmethod
    def is_sensitive_field(cls, key: str) -> bool:
        """
        Check if a field name indicates sensitive data.

        Args:
            key: Field name to check

        Returns:
            True if field is sensitive, False otherwise
        """
        # Normalize key: lowercase and remove underscores/hyphens
        normalized_key = key.lower().replace("_", "").replace("-", "")

        if normalized_key in cls._sensitive_fields:
            return True

        return any(sensitive in normalized_key for sensitive in cls._sensitive_fields)

    @classmethod
    def mask_sensitive_data(cls, data: Any) -> Any:
        """
        Mask sensitive data in objects, arrays, or primitives.

        Returns a masked copy without modifying the original.
        Recursively processes nested objects and arrays.

        Args:
            data: Data to mask (dict, list, or primitive)

        Returns:
            Masked copy of the data
        """
        if isinstance(data, list):
            return [cls.mask_sensitive_data(item) for item in data]

        if not isinstance(data, dict):
            return data

        masked: dict[str, Any] = {}
        for key, value in data.items():
            if cls.is_sensitive_field(str(key)):
                masked[key] = cls.MASKED_VALUE
            else:
                masked[key] = cls.mask_sensitive_data(value)

        return masked

    @classmethod
    def mask_path(cls, path: str) -> str:
        """
        Mask secrets embedded in an endpoint path.

        Args:
            path: Endpoint path (e.g. "memberships/filter/token/abc123/")

        Returns:
            Path with secret segments replaced
        """
        return cls._path_pattern.sub(lambda match: match.group(1) + cls.MASKED_VALUE, path)

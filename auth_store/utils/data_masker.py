"""
Data masker utility for log context protection.

Masks API keys, secrets and similar fields before they reach a log handler.
"""

from typing import Any, Dict, Set


class DataMasker:
    """Static class for masking sensitive data."""

    MASKED_VALUE = "***MASKED***"

    # Set of sensitive field names (normalized)
    _sensitive_fields: Set[str] = {
        "password",
        "secret",
        "token",
        "apikey",
        "authorization",
        "credentials",
        "key",
    }

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

        return any(field in normalized_key for field in cls._sensitive_fields)

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
        if not isinstance(data, (dict, list)):
            return data

        if isinstance(data, list):
            return [cls.mask_sensitive_data(item) for item in data]

        masked: Dict[str, Any] = {}
        for key, value in data.items():
            if cls.is_sensitive_field(key):
                masked[key] = cls.MASKED_VALUE
            else:
                masked[key] = cls.mask_sensitive_data(value)

        return masked

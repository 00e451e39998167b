"""Form encoder for x-www-form-urlencoded bodies."""
from urllib.parse import urlencode
from typing import Any, Dict, Mapping, Union


class FormEncoder:
    """Encodes form fields with keys in sorted order."""
    
    @staticmethod
    def fields(data: Union[Mapping[str, Any], Any]) -> Dict[str, str]:
        """Extracts form fields from a mapping or an object with ``to_form()``."""
        if hasattr(data, 'to_form'):
            data = data.to_form()
        if not isinstance(data, Mapping):
            raise TypeError(f"Cannot form-encode {type(data).__name__}")
        return {key: str(value) for key, value in data.items()}
    
    @classmethod
    def encode(cls, data: Union[Mapping[str, Any], Any]) -> bytes:
        """Encodes data as a URL-encoded body."""
        fields = cls.fields(data)
        return urlencode(sorted(fields.items())).encode('ascii')

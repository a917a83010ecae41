# onesky/api/models.py
# Created: 2026-10-19 10:31:17

from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from ..core.exceptions import DecodeError
from ..core.utils import lookup, normalize_id

def _object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = lookup(data, key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"Field {key!r} must be an object, got {type(value).__name__}")
    return value

def _str(data: Dict[str, Any], key: str) -> str:
    value = lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value

def _int(data: Dict[str, Any], key: str) -> int:
    value = lookup(data, key)
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field {key!r} must be an integer, got {type(value).__name__}")
    return value

@dataclass
class Language:
    """Locale as described by the service"""
    code: str = ""
    english_name: str = ""
    local_name: str = ""
    custom_locale: str = ""
    locale: str = ""
    region: str = ""
    translation_progress: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Language":
        return cls(
            code=_str(data, "code"),
            english_name=_str(data, "english_name"),
            local_name=_str(data, "local_name"),
            custom_locale=_str(data, "custom_locale"),
            locale=_str(data, "locale"),
            region=_str(data, "region"),
            translation_progress=_str(data, "translation_progress")
        )

@dataclass
class LastImport:
    id: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LastImport":
        return cls(id=normalize_id(lookup(data, "id")), status=_str(data, "status"))

@dataclass
class FileRecord:
    """Uploaded source file"""
    name: str = ""
    file_name: str = ""
    string_count: int = 0
    last_import: LastImport = field(default_factory=LastImport)
    uploaded_at: str = ""
    uploaded_at_timestamp: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileRecord":
        return cls(
            name=_str(data, "name"),
            file_name=_str(data, "file_name"),
            string_count=_int(data, "string_count"),
            last_import=LastImport.from_dict(_object(data, "last_import")),
            uploaded_at=_str(data, "uploaded_at"),
            uploaded_at_timestamp=_int(data, "uploaded_at_timestamp")
        )

@dataclass
class TaskFile:
    name: str = ""
    format: str = ""
    locale: Language = field(default_factory=Language)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaskFile":
        return cls(
            name=_str(data, "name"),
            format=_str(data, "format"),
            locale=Language.from_dict(_object(data, "locale"))
        )

@dataclass
class ImportTask:
    """
    Import task of an uploaded file.

    ``id`` is normalized from whatever JSON type the endpoint used, while
    ``original_id`` keeps the raw value.
    """
    id: int = 0
    original_id: Any = None
    file: TaskFile = field(default_factory=TaskFile)
    string_count: int = 0
    word_count: int = 0
    status: str = ""
    created_at: str = ""
    created_at_timestamp: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportTask":
        original_id = lookup(data, "id")
        return cls(
            id=normalize_id(original_id),
            original_id=original_id,
            file=TaskFile.from_dict(_object(data, "file")),
            string_count=_int(data, "string_count"),
            word_count=_int(data, "word_count"),
            status=_str(data, "status"),
            created_at=_str(data, "created_at"),
            created_at_timestamp=_int(data, "created_at_timestamp")
        )

@dataclass
class TranslationStatus:
    file_name: str = ""
    locale: Language = field(default_factory=Language)
    progress: str = ""
    string_count: int = 0
    word_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslationStatus":
        return cls(
            file_name=_str(data, "file_name"),
            locale=Language.from_dict(_object(data, "locale")),
            progress=_str(data, "progress"),
            string_count=_int(data, "string_count"),
            word_count=_int(data, "word_count")
        )

@dataclass
class UploadResult:
    """Echo of an uploaded file and the import task it started"""
    name: str = ""
    format: str = ""
    language: Language = field(default_factory=Language)
    import_task: ImportTask = field(default_factory=ImportTask)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadResult":
        return cls(
            name=_str(data, "name"),
            format=_str(data, "format"),
            language=Language.from_dict(_object(data, "language")),
            import_task=ImportTask.from_dict(_object(data, "import"))
        )

@dataclass
class ResponseMeta:
    status: Optional[int] = None
    record_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponseMeta":
        status = data.get("status")
        record_count = data.get("record_count")
        return cls(
            status=status if isinstance(status, int) else None,
            record_count=record_count if isinstance(record_count, int) else None
        )

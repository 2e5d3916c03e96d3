"""
Pydantic models for settings resolution.
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, field_validator


class ResolveContext(BaseModel):
    """Ambient directories that path resolution depends on."""
    cwd: str
    home: str

    @classmethod
    def from_process(cls, cwd: Optional[str] = None) -> 'ResolveContext':
        """Build a context from the running process."""
        return cls(cwd=cwd or os.getcwd(), home=str(Path.home()))


class LaunchFields(BaseModel):
    """Recognized input fields. None means unset; blank strings count as unset."""
    ANDROID_ZIPALIGN: Optional[str] = None
    METEOR_INPUT_DIR: Optional[str] = None
    METEOR_OUTPUT_DIR: Optional[str] = None
    XCODE_SCHEME_NAME: Optional[str] = None

    @field_validator('*', mode='before')
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value)
        if not value.strip():
            return None
        return value

    @classmethod
    def from_mapping(cls, merged: Dict[str, Any]) -> 'LaunchFields':
        """Pick the recognized fields out of a merged settings mapping."""
        return cls(**{name: merged.get(name) for name in cls.model_fields})

import codecs

from pydantic import BaseModel, Field, ValidationError, field_validator

from codec_support import config

__all__ = ["CodecSettings", "ValidationError"]


class CodecSettings(BaseModel):
    """
     Encoding options shared by every conversion a CodecSupport
     instance performs.
    """
    encoding: str = Field(default=config.PREFERRED_ENCODING, description="Text encoding used when none is given explicitly.")
    errors: str = Field(default=config.DEFAULT_ERRORS, description="Codec error handler, e.g. 'strict' or 'replace'.")
    buffer_size: int = Field(default=config.DEFAULT_BUFFER_SIZE, gt=0, description="Chunk size in bytes used when draining streams.")

    model_config = {"frozen": True, "validate_default": True}

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encoding names Python's codec registry does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding '{v}'") from e
        return v

    @field_validator("errors")
    @classmethod
    def validate_errors(cls, v: str) -> str:
        try:
            codecs.lookup_error(v)
        except LookupError as e:
            raise ValueError(f"unknown codec error handler '{v}'") from e
        return v

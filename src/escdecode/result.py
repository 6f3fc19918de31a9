from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field, model_validator

from escdecode.decoder import decode
from escdecode.error import DecodeError
from escdecode.types import ErrorKind


class DecodeResult(BaseModel):
    """
    Outcome of decoding one input, either the decoded text or the kind of
    error that aborted decoding.
    """

    model_config = ConfigDict(frozen=True)

    input: str
    output: str | None = None
    error: ErrorKind | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> DecodeResult:
        if (self.output is None) == (self.error is None):
            raise ValueError("Exactly one of 'output' and 'error' must be set")
        return self

    @computed_field
    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_text(cls, text: str) -> DecodeResult:
        try:
            return cls(input=text, output=decode(text))
        except DecodeError as e:
            return cls(input=text, error=e.kind)

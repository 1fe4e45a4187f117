from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, NoReturn, Optional

from suonora.errors import ValidationError, raise_logged

MAX_INPUT_CHARS = 5000


@dataclass(frozen=True)
class SynthesisRequest:
    """
    Parameters for one synthesis call.

    Optional fields are sent only when they are not None, so explicit zero or
    empty values (e.g. ``style_degree=0``) reach the server unchanged.
    """

    input: Any = None
    model: Any = None
    voice: Any = None
    pitch: Optional[str] = None
    style: Optional[str] = None
    style_degree: Optional[float] = None
    lang: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "input": self.input,
            "model": self.model,
            "voice": self.voice,
        }
        if self.pitch is not None:
            payload["pitch"] = self.pitch
        if self.style is not None:
            payload["style"] = self.style
        if self.style_degree is not None:
            payload["styleDegree"] = self.style_degree
        if self.lang is not None:
            payload["lang"] = self.lang
        return payload


def validate_request(req: SynthesisRequest, *, operation: str = "audio.create") -> SynthesisRequest:
    if not isinstance(req.input, str) or not req.input:
        _reject("Input text is required and must be a non-empty string for %s." % operation, operation)
    if len(req.input) > MAX_INPUT_CHARS:
        _reject("Input text exceeds the %d character limit." % MAX_INPUT_CHARS, operation)
    if not isinstance(req.model, str) or not req.model:
        _reject('"model" is a required string for %s.' % operation, operation)
    if not isinstance(req.voice, str) or not req.voice:
        _reject('"voice" is a required string for %s.' % operation, operation)

    for name in ("pitch", "style", "lang"):
        v = getattr(req, name)
        if v is not None and not isinstance(v, str):
            _reject('"%s" must be a string for %s.' % (name, operation), operation)

    sd = req.style_degree
    if sd is not None:
        # bool is an int subclass.
        if isinstance(sd, bool) or not isinstance(sd, (int, float)):
            _reject('"style_degree" must be a number for %s.' % operation, operation)
        if isinstance(sd, float) and not math.isfinite(sd):
            _reject('"style_degree" must be a finite number for %s.' % operation, operation)

    return req


def build_request(
    *,
    input: Any = None,
    model: Any = None,
    voice: Any = None,
    pitch: Optional[str] = None,
    style: Optional[str] = None,
    style_degree: Optional[float] = None,
    lang: Optional[str] = None,
    operation: str = "audio.create",
) -> SynthesisRequest:
    req = SynthesisRequest(
        input=input,
        model=model,
        voice=voice,
        pitch=pitch,
        style=style,
        style_degree=style_degree,
        lang=lang,
    )
    return validate_request(req, operation=operation)


def _reject(message: str, operation: str) -> NoReturn:
    raise_logged(ValidationError(message), operation=operation)

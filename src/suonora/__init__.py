"""Async client for the Suonora text-to-speech API."""

from suonora.audio import Audio, AudioStream
from suonora.client import Suonora
from suonora.config import ClientConfig, SuonoraSettings, resolve_config
from suonora.errors import (
    ApiError,
    ConfigurationError,
    FormatError,
    SuonoraError,
    TransportError,
    ValidationError,
)
from suonora.speech import MAX_INPUT_CHARS, SynthesisRequest, build_request

__version__ = "0.1.0"

__all__ = [
    "Suonora",
    "Audio",
    "AudioStream",
    "ClientConfig",
    "SuonoraSettings",
    "resolve_config",
    "SynthesisRequest",
    "build_request",
    "MAX_INPUT_CHARS",
    "SuonoraError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "TransportError",
    "FormatError",
]

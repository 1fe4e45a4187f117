from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, TypeVar

import httpx
import typer

from suonora.client import Suonora
from suonora.config import SuonoraSettings, load_settings
from suonora.core.logging import configure_logging, get_logger
from suonora.errors import SuonoraError

app = typer.Typer(no_args_is_help=True)

T = TypeVar("T")


def _make_client(settings: SuonoraSettings) -> Suonora:
    return Suonora(settings=settings)


def _run(fn: Callable[[Suonora], Awaitable[T]]) -> T:
    try:
        settings = load_settings()
    except SuonoraError as e:
        typer.echo(str(e), err=True)
        raise SystemExit(1)
    configure_logging(settings.log_level)

    async def run_once() -> T:
        async with _make_client(settings) as client:
            return await fn(client)

    try:
        return asyncio.run(run_once())
    except (SuonoraError, httpx.HTTPError, OSError) as e:
        typer.echo(str(e) or type(e).__name__, err=True)
        raise SystemExit(1)


@app.command()
def speak(
    text: str = typer.Argument(..., help="Text to synthesize (max 5000 characters)"),
    model: str = typer.Option(..., "--model", help="Synthesis model (e.g. legacy-v2.5)"),
    voice: str = typer.Option(..., "--voice", help="Voice id (e.g. axel)"),
    out: Path = typer.Option(Path("speech.mp3"), "--out", help="Where to write the MP3"),
    pitch: str = typer.Option(None, "--pitch", help="Pitch adjustment (e.g. -50%, +20%)"),
    style: str = typer.Option(None, "--style", help="Speaking style (e.g. cheerful)"),
    style_degree: float = typer.Option(None, "--style-degree", help="Style intensity (0.5 to 2.0)"),
    lang: str = typer.Option(None, "--lang", help="BCP-47 language code (e.g. fr-FR)"),
    stream: bool = typer.Option(False, "--stream", help="Use the streaming endpoint"),
) -> None:
    """Synthesize TEXT and write the audio to a file."""
    params: Dict[str, Any] = dict(
        input=text,
        model=model,
        voice=voice,
        pitch=pitch,
        style=style,
        style_degree=style_degree,
        lang=lang,
    )

    async def go(client: Suonora) -> int:
        if not stream:
            data = await client.audio.create(**params)
            out.write_bytes(data)
            return len(data)

        written = 0
        async with await client.audio.stream(**params) as audio:
            with out.open("wb") as f:
                try:
                    async for chunk in audio:
                        f.write(chunk)
                        written += len(chunk)
                except (httpx.HTTPError, OSError):
                    # Drop the partial file.
                    f.close()
                    out.unlink()
                    raise
        return written

    size = _run(go)
    get_logger(component="suonora.cli").info("audio_saved", path=str(out), bytes=size)
    typer.echo("Wrote %d bytes to %s" % (size, out))


@app.command()
def voices(
    language: str = typer.Option(None, "--language", help="Language filter (not applied by the API)"),
    model: str = typer.Option(None, "--model", help="Model filter (not applied by the API)"),
) -> None:
    """List available voices as JSON."""
    items = _run(lambda client: client.list_voices(language=language, model=model))
    typer.echo(json.dumps(items, indent=2, ensure_ascii=False))


@app.command()
def balance() -> None:
    """Show the account balance as JSON."""
    data = _run(lambda client: client.get_balance())
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()

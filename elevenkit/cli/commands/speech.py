"""
Speech related commands
"""
import asyncio
import logging
from pathlib import Path

import typer

from elevenkit.speech.catalog import MODELS, VOICES
from elevenkit.speech.elevenlabs_provider import ElevenLabsConfig
from elevenkit.speech.service import SpeechService
from elevenkit.cli.utils import setup_logging


# Configure logging
logger = logging.getLogger("elevenkit.speech")
app = typer.Typer(help="Speech related commands")


# Provider config mapping
PROVIDER_CONFIGS = {
    "elevenlabs": ElevenLabsConfig,
}


# Common provider option
PROVIDER_OPTION = typer.Option(
    "elevenlabs",
    "-p", "--provider",
    help="Provider type (elevenlabs)",
)

VOICE_OPTION = typer.Option(
    None,
    "-v", "--voice",
    help="Voice name or raw voice id",
)

MODEL_OPTION = typer.Option(
    None,
    "-m", "--model",
    help="Model name or raw model id",
)


def _create_service(provider: str) -> SpeechService:
    if provider.lower() not in PROVIDER_CONFIGS:
        raise typer.BadParameter(
            f"Provider must be one of: {', '.join(PROVIDER_CONFIGS.keys())}"
        )
    config_class = PROVIDER_CONFIGS[provider.lower()]
    return SpeechService(config_class())


@app.callback()
def callback(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode",
    ),
):
    """
    Speech command line tool
    """
    global logger
    logger = setup_logging(debug, "elevenkit")


@app.command("text-to-speech")
def text_to_speech(
    text_file: Path = typer.Option(
        ...,
        "-t", "--text",
        help="Text file to convert to speech",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output_file: Path = typer.Option(
        ...,
        "-o", "--output",
        help="Output audio file path",
        file_okay=True,
        dir_okay=False,
    ),
    provider: str = PROVIDER_OPTION,
    voice: str = VOICE_OPTION,
    model: str = MODEL_OPTION,
):
    """
    Convert text to speech
    """
    logger.debug(
        "Converting text to speech: %s -> %s (provider=%s, voice=%s, "
        "model=%s)",
        text_file, output_file, provider, voice, model
    )

    try:
        service = _create_service(provider)

        with open(text_file, encoding="utf-8") as f:
            text = f.read()

        asyncio.run(service.text_to_speech(
            text,
            str(output_file),
            voice=voice,
            model=model
        ))

        typer.echo(f"Successfully converted text to speech: {output_file}")
    except Exception as e:
        logger.error(
            "Failed to convert text to speech: %s",
            str(e),
            exc_info=True
        )
        typer.echo(f"Failed to convert text to speech: {str(e)}")
        raise typer.Exit(1)


@app.command("speech-to-speech")
def speech_to_speech(
    audio_file: Path = typer.Option(
        ...,
        "-a", "--audio",
        help="Audio file to convert",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output_file: Path = typer.Option(
        ...,
        "-o", "--output",
        help="Output audio file path",
        file_okay=True,
        dir_okay=False,
    ),
    provider: str = PROVIDER_OPTION,
    voice: str = VOICE_OPTION,
    model: str = MODEL_OPTION,
    output_format: str = typer.Option(
        None,
        "-f", "--format",
        help="Output format, e.g. mp3_44100_128",
    ),
):
    """
    Convert speech into another voice
    """
    logger.debug(
        "Converting speech to speech: %s -> %s (provider=%s, voice=%s, "
        "model=%s, format=%s)",
        audio_file, output_file, provider, voice, model, output_format
    )

    try:
        service = _create_service(provider)
        options = {}
        if output_format:
            options["output_format"] = output_format

        asyncio.run(service.speech_to_speech(
            str(audio_file),
            str(output_file),
            voice=voice,
            model=model,
            **options
        ))

        typer.echo(f"Successfully converted speech: {output_file}")
    except Exception as e:
        logger.error(
            "Failed to convert speech: input=%s, output=%s, error=%s",
            audio_file, output_file, str(e),
            exc_info=True
        )
        typer.echo(f"Failed to convert speech: {str(e)}")
        raise typer.Exit(1)


@app.command("isolate")
def isolate(
    audio_file: Path = typer.Option(
        ...,
        "-a", "--audio",
        help="Audio file to isolate speech from",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output_file: Path = typer.Option(
        ...,
        "-o", "--output",
        help="Output audio file path",
        file_okay=True,
        dir_okay=False,
    ),
    provider: str = PROVIDER_OPTION,
):
    """
    Isolate speech from background noise
    """
    logger.debug("Isolating speech: %s -> %s (provider=%s)",
                 audio_file, output_file, provider)

    try:
        service = _create_service(provider)
        asyncio.run(service.isolate_speech(str(audio_file), str(output_file)))
        typer.echo(f"Successfully isolated speech: {output_file}")
    except Exception as e:
        logger.error(
            "Failed to isolate speech: %s",
            str(e),
            exc_info=True
        )
        typer.echo(f"Failed to isolate speech: {str(e)}")
        raise typer.Exit(1)


@app.command("voices")
def voices():
    """
    List the named voices
    """
    for name, voice_id in VOICES.items():
        typer.echo(f"{name}\t{voice_id}")


@app.command("models")
def models():
    """
    List the named models
    """
    for name, model_id in MODELS.items():
        typer.echo(f"{name}\t{model_id}")

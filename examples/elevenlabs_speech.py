#!/usr/bin/env python3
"""
Basic example of the ElevenLabs wrappers.

This example demonstrates:
1. Text-to-speech (TTS)
2. Speech-to-speech voice conversion (STS)
3. Speech isolation

Before running this example, set ELEVENLABS_API_KEY.
"""

import asyncio
import logging
import os

from elevenkit import tts, sts, isl

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)


async def main():
    """Run the example."""
    os.makedirs("outputs", exist_ok=True)

    speech = await tts('turbo_v2_5', 'george')(
        "Hello! This sentence was generated with ElevenLabs."
    )
    speech.save(os.path.join("outputs", speech.name))
    print(f"Text-to-speech: {speech!r}")

    converted = await sts(voice='lily')(speech)
    converted.save(os.path.join("outputs", converted.name))
    print(f"Speech-to-speech: {converted!r}")

    isolated = await isl()(converted)
    isolated.save(os.path.join("outputs", isolated.name))
    print(f"Isolation: {isolated!r}")


if __name__ == "__main__":
    asyncio.run(main())

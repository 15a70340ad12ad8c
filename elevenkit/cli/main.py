"""
Main CLI entry point for elevenkit
"""
import typer

from elevenkit.cli.commands import speech

app = typer.Typer(
    name="elevenkit",
    help="Convenience tools for the ElevenLabs speech API",
    add_completion=False,
)

# Register speech commands
app.add_typer(speech.app, name="speech", help="Speech related commands")


def main():
    """Main entry point for the CLI"""
    app()


if __name__ == "__main__":
    main()

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from tudu.config import Settings
from tudu.controller import Controller
from tudu.logging_utils import level_from_name, logger, set_level
from tudu.view import ConsoleView


@click.command(
    help=(
        "Keep a to-do list on the console.\n\n"
        "Type a task and press enter to add it. Type the complete word to finish the "
        "first pending task, or the quit word to leave."
    ),
)
@click.option("--quit-word", help="Input that ends the session.  [default: quit]")
@click.option("--complete-word", help="Input that completes the first pending task.  [default: done]")
@click.option("--prompt", help="Prompt shown before each line of input.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with any of the settings above.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Log level for messages written to stderr.",
)
def cli(
    quit_word: str | None,
    complete_word: str | None,
    prompt: str | None,
    config_path: Path | None,
    log_level: str | None,
) -> None:
    """
    Run the interactive to-do loop

    Usage:
        uv run tudu --complete-word finish

        TUDU_LOG_LEVEL=debug uv run tudu # Enable debug logging
    """
    try:
        settings = Settings.load(
            config_path,
            quit_word=quit_word,
            complete_word=complete_word,
            prompt=prompt,
            log_level=log_level,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings:\n{e}") from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    set_level(level_from_name(settings.LOG_LEVEL), logger=logger)

    controller = Controller(
        ConsoleView(prompt=settings.PROMPT),
        quit_word=settings.QUIT_WORD,
        complete_word=settings.COMPLETE_WORD,
    )
    try:
        controller.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, ending session.")
        click.echo()


if __name__ == "__main__":
    cli()

"""CLI entry point for vocalnav.

Parses arguments, configures logging, and runs a command session over
utterances given on the command line, or read interactively until EOF.
setup_environment() is called before litellm can be imported.
"""

import argparse
import dataclasses
import json
import logging
import os

from vocalnav.core.constants import DEFAULT_CLASSIFIER_TIMEOUT, DEFAULT_LLM_MODEL


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Interpret voice commands for the accessibility app (ru/en)"
    )
    parser.add_argument(
        "utterances",
        nargs="*",
        help="Transcribed utterances to interpret (interactive prompt if none)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help=f"litellm model for intent classification (default: config or {DEFAULT_LLM_MODEL})",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the remote classifier; keyword rules only",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Remote classifier timeout in seconds (default: config or {DEFAULT_CLASSIFIER_TIMEOUT})",
    )
    parser.add_argument(
        "--voice-nav",
        action="store_true",
        help="Start with voice-navigation mode active",
    )
    parser.add_argument(
        "--store-file",
        default=None,
        help="Preferences JSON file (default: from config)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per utterance instead of panels",
    )
    parser.add_argument(
        "--config-file",
        default=None,
        help="JSON config file (default: ~/.config/vocalnav/config.json)",
    )
    return parser


def _turn_json(turn) -> str:
    from vocalnav.apps.ui import describe_action

    return json.dumps(
        {
            "text": turn.text,
            "result": turn.result.as_dict() if turn.result else None,
            "action": describe_action(turn.action),
            "voice_nav_active": turn.voice_nav_active,
            "message": turn.message,
            "via": turn.via,
        },
        ensure_ascii=False,
    )


async def _run(args: argparse.Namespace, config) -> int:
    import asyncio

    from rich.console import Console

    from vocalnav.api import build_resolver
    from vocalnav.apps.session import CommandSession
    from vocalnav.apps.store import JsonPreferenceStore
    from vocalnav.apps.ui import ConsoleAnnouncer, ConsoleNavigator, render_turn

    console = Console(stderr=args.json)
    session = CommandSession(
        resolver=build_resolver(config.classifier, offline=args.offline),
        navigator=ConsoleNavigator(console),
        store=JsonPreferenceStore(args.store_file or config.session.store_file),
        announcer=ConsoleAnnouncer(console),
        config=config.session,
        corrections=config.corrections,
        voice_nav_active=args.voice_nav,
    )

    async def show(text: str) -> None:
        turn = await session.handle(text)
        if args.json:
            print(_turn_json(turn), flush=True)
        else:
            console.print(render_turn(turn))

    if args.utterances:
        for text in args.utterances:
            await show(text)
        return 0

    while True:
        try:
            text = await asyncio.to_thread(console.input, "[bold green]> [/bold green]")
        except (EOFError, KeyboardInterrupt):
            return 0
        if text.strip():
            await show(text)


def main() -> int:
    """CLI entry point. Returns exit code."""
    # Must run before litellm is imported.
    from vocalnav.core.env import setup_environment

    setup_environment()

    import asyncio

    from rich.console import Console
    from rich.logging import RichHandler

    from vocalnav.apps.config import load_config
    from vocalnav.core.errors import ConfigError

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    parser = build_arg_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config_file)
    except ConfigError as exc:
        parser.error(str(exc))

    classifier = config.classifier
    if args.model:
        classifier = dataclasses.replace(classifier, model=args.model)
    if args.timeout is not None:
        classifier = dataclasses.replace(classifier, timeout=args.timeout)
    config = dataclasses.replace(config, classifier=classifier)

    return asyncio.run(_run(args, config))

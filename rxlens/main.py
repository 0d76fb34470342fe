"""Entry point — wires Config → OpenAIPrescriptionTranscriber → TelegramClient."""
import logging
from typing import Optional

from rich.logging import RichHandler

from rxlens.config import Config
from rxlens.constants import MSG_BOT_STARTING, MSG_TRANSCRIBER_DISABLED
from rxlens.exceptions import ConfigurationError
from rxlens.telegram.client import TelegramClient
from rxlens.transcription.client import PrescriptionTranscriber
from rxlens.transcription.openai import OpenAIPrescriptionTranscriber

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))
    # httpx logs every request URL at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_transcriber(config: Config) -> Optional[PrescriptionTranscriber]:
    """A missing API key disables translation only; the bot still starts."""
    try:
        return OpenAIPrescriptionTranscriber(config.transcriber_config())
    except ConfigurationError as exc:
        logger.warning(MSG_TRANSCRIBER_DISABLED, exc)
        return None


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger.info(MSG_BOT_STARTING)

    client = TelegramClient(config, transcriber=build_transcriber(config))
    client.run()


if __name__ == "__main__":
    main()

"""TelegramClient — photo-in, translation-out transport via python-telegram-bot."""
import logging
import time
from typing import Callable, Optional

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from rxlens.capture.telegram import TelegramPhotoCapture
from rxlens.config import Config
from rxlens.constants import (
    CMD_CLEAR,
    CMD_HELP,
    CMD_START,
    CMD_STATUS,
    MSG_BLOCKED_CHAT,
    MSG_CLEARED,
    MSG_HELP,
    MSG_NOT_CONFIGURED,
    MSG_REPLIED,
    MSG_SEND_BEFORE_RUN,
    MSG_SEND_FAIL,
    MSG_STATUS,
    MSG_TRANSLATE_BUSY_USER,
    MSG_TRANSLATING,
)
from rxlens.session import TranslationSession
from rxlens.transcription.client import PrescriptionTranscriber

logger = logging.getLogger(__name__)


def normalize_chat_id(s: str) -> str:
    return "".join(c for c in s if c.isdigit() or c == "-")


class TelegramClient:

    def __init__(
        self,
        config: Config,
        transcriber: Optional[PrescriptionTranscriber] = None,
    ) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = config.allowed_chat_id
        self._app: Optional[Application] = None
        self._transcriber = transcriber
        self._sessions: dict[str, TranslationSession] = {}

    def run(self) -> None:
        # A second photo may arrive while the chat's session is still pending.
        self._app = (
            Application.builder()
            .token(self._token)
            .concurrent_updates(True)
            .post_shutdown(self.shutdown)
            .build()
        )
        self._app.add_handler(TGMessageHandler(filters.PHOTO, self.handle_photo))
        self._app.add_handler(CommandHandler(CMD_CLEAR, self._make_sender_handler(self.clear)))
        self._app.add_handler(CommandHandler(CMD_STATUS, self._make_sender_handler(self.status)))
        self._app.add_handler(
            CommandHandler([CMD_HELP, CMD_START], self._make_sender_handler(lambda _: MSG_HELP))
        )
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error(MSG_SEND_BEFORE_RUN)
                return False
            case app:
                try:
                    await app.bot.send_message(chat_id=int(to), text=text)
                    return True
                except Exception as exc:
                    logger.error(MSG_SEND_FAIL, exc)
                    return False

    async def shutdown(self, app: Application) -> None:
        match self._transcriber:
            case None:
                pass
            case transcriber:
                await transcriber.aclose()

    # ── session state ─────────────────────────────────────────────────────────

    def session_for(self, sender: str) -> Optional[TranslationSession]:
        match self._transcriber:
            case None:
                return None
            case transcriber:
                return self._sessions.setdefault(sender, TranslationSession(transcriber))

    def clear(self, sender: str) -> str:
        session = self.session_for(sender)
        match session:
            case None:
                return MSG_NOT_CONFIGURED
            case s if s.reset():
                return MSG_CLEARED
            case _:
                return MSG_TRANSLATE_BUSY_USER

    def status(self, sender: str) -> str:
        session = self.session_for(sender)
        match session:
            case None:
                return MSG_NOT_CONFIGURED
            case s:
                return MSG_STATUS % s.status.value

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        incoming = normalize_chat_id(str(update.effective_chat.id))
        allowed = normalize_chat_id(self._allowed_chat_id)
        return incoming == allowed

    # ── handlers ──────────────────────────────────────────────────────────────

    def _make_sender_handler(self, callback: Callable[[str], str]) -> Callable:
        """Handler for commands that reply with callback(sender)."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass
            sender = str(update.effective_chat.id)
            await self.send_message(sender, callback(sender))

        return _handler

    async def handle_photo(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        match self._is_allowed(update):
            case False:
                chat_id = update.effective_chat.id if update.effective_chat else "?"
                logger.warning(MSG_BLOCKED_CHAT, chat_id)
                return
            case True:
                pass

        sender = str(update.effective_chat.id)
        session = self.session_for(sender)
        match session:
            case None:
                await self.send_message(sender, MSG_NOT_CONFIGURED)
                return
            case s if s.busy:
                await self.send_message(sender, MSG_TRANSLATE_BUSY_USER)
                return
            case _:
                pass

        photos = update.message.photo if update.message else ()
        start = time.time()
        await self.send_message(sender, MSG_TRANSLATING)
        result = await session.translate(TelegramPhotoCapture(photos))
        match result:
            case None:
                await self.send_message(sender, MSG_TRANSLATE_BUSY_USER)
            case _:
                logger.info(MSG_REPLIED, sender, time.time() - start)
                await self.send_message(sender, session.message)

from rxlens.config import Config
from rxlens.main import build_transcriber
from rxlens.transcription.openai import OpenAIPrescriptionTranscriber


def make_config(api_key):
    return Config(
        telegram_bot_token="token",
        allowed_chat_id="123456789",
        log_level="INFO",
        openai_api_key=api_key,
        openai_model="gpt-4o",
        openai_base_url="https://api.openai.com/v1",
        openai_timeout=None,
    )


def test_build_transcriber_with_key():
    assert isinstance(build_transcriber(make_config("sk-test")), OpenAIPrescriptionTranscriber)


def test_build_transcriber_without_key_disables_translation():
    assert build_transcriber(make_config(None)) is None

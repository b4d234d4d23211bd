"""Tests for the CLI entry point and application wiring."""

import pytest
from click.testing import CliRunner

from welcomebot.config import Settings
from welcomebot.main import WelcomeBot, cli
from welcomebot.models import EntityType, InboundEvent


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PACHCA_TOKEN", "PACHCA_SIGNING_SECRET", "PORT", "WELCOMEBOT_CONFIG"):
        monkeypatch.delenv(name, raising=False)


class TestCli:
    def test_missing_credentials_exits(self):
        result = CliRunner().invoke(cli, [])
        assert result.exit_code != 0
        assert "PACHCA_TOKEN" in result.output
        assert "PACHCA_SIGNING_SECRET" in result.output

    def test_invalid_port_exits_with_message(self, monkeypatch):
        monkeypatch.setenv("PACHCA_TOKEN", "t")
        monkeypatch.setenv("PACHCA_SIGNING_SECRET", "s")
        monkeypatch.setenv("PORT", "abc")
        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 1
        assert "invalid configuration" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_invalid_yaml_exits_with_message(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api: {token: \"unterminated\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["--config", str(path)])
        assert result.exit_code == 1
        assert "invalid YAML" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "welcomebot" in result.output


class TestWelcomeBot:
    async def test_wires_greeter_to_transport(self, transport):
        settings = Settings(
            api={"token": "t"},
            webhook={"signing_secret": "s"},
            greeting={"fallback_alias": "friend"},
        )
        bot = WelcomeBot(settings, transport=transport)
        transport.fail_lookup = True

        message = await bot.greeter.handle(
            InboundEvent(type="chat_member", event="add", chat_id=42, user_ids=[7])
        )

        assert message.entity_type == EntityType.DISCUSSION
        assert message.content.startswith("friend, ")

    async def test_stop_closes_transport(self, transport):
        settings = Settings(api={"token": "t"}, webhook={"signing_secret": "s"})
        bot = WelcomeBot(settings, transport=transport)
        await bot.stop()
        assert transport.closed is True

    async def test_template_file(self, transport, tmp_path):
        path = tmp_path / "welcome.txt"
        path.write_text("Hi there", encoding="utf-8")
        settings = Settings(
            api={"token": "t"},
            webhook={"signing_secret": "s"},
            greeting={"template_file": str(path)},
        )
        bot = WelcomeBot(settings, transport=transport)
        message = await bot.greeter.handle(
            InboundEvent(type="chat_member", event="add", chat_id=42)
        )
        assert message.content == "Hi there"

"""
Unit tests for the parser, calculators, request gate, prompts and settings
"""
import math
import pytest

from prompt.prompt_manager import PromptManager, get_prompt_manager
from services.calculator_service import ad_earnings, finite_or_none, subscription_earnings, to_number
from templates.mock_templates import MockTextGenerator
from utils.request_gate import RequestGate
from utils.text_parser import parse_lines


@pytest.mark.unit
class TestParseLines:
    """Generated text splitting"""

    def test_mixed_newlines(self):
        assert parse_lines("a\n\nb\r\nc", 2) == ["a", "b"]

    def test_trims_and_drops_blanks(self):
        assert parse_lines("  one \n\t\n two\r\n\r\n", 10) == ["one", "two"]

    def test_preserves_order_under_limit(self):
        assert parse_lines("z\ny\nx", 5) == ["z", "y", "x"]

    def test_empty_input(self):
        assert parse_lines("", 5) == []
        assert parse_lines("\n \r\n", 5) == []

    def test_never_returns_blank_entries(self):
        raw = "\n".join(["", " x ", "\t", "y", "   ", "z "])
        lines = parse_lines(raw, 100)
        assert all(line and line == line.strip() for line in lines)

    def test_zero_limit(self):
        assert parse_lines("a\nb", 0) == []


@pytest.mark.unit
class TestCalculators:
    """Earnings math"""

    def test_subscription_tiers(self):
        assert subscription_earnings(100, 1) == 250
        assert subscription_earnings(100, 2) == 500
        assert subscription_earnings(100, 3) == 1250

    def test_unknown_tier_falls_back(self):
        assert subscription_earnings(100, 99) == 250
        assert subscription_earnings(100, "gold") == 250

    def test_tier_given_as_text_or_float(self):
        assert subscription_earnings(10, "2") == 50
        assert subscription_earnings(10, 2.0) == 50

    def test_ad_earnings(self):
        assert ad_earnings(10, 5000, 3) == 150
        assert ad_earnings(10, 5000) == 150

    def test_negative_values_accepted(self):
        assert subscription_earnings(-4, 2) == -20

    def test_nan_propagates(self):
        assert math.isnan(subscription_earnings("many", 1))
        assert math.isnan(ad_earnings("x", 1000, 3))

    def test_huge_integers_become_infinite(self):
        huge = int("9" * 400)
        assert subscription_earnings(huge, 1) == math.inf
        assert subscription_earnings(-huge, 1) == -math.inf
        assert math.isnan(ad_earnings(0, "9" * 400, 3))
        assert finite_or_none(huge) is None
        assert finite_or_none(12) == 12


@pytest.mark.unit
class TestToNumber:
    """Loose numeric coercion"""

    def test_numbers_pass_through(self):
        assert to_number(3) == 3
        assert to_number(2.5) == 2.5

    def test_strings(self):
        assert to_number(" 42 ") == 42
        assert to_number("1e3") == 1000
        assert to_number("0x10") == 16
        assert to_number("") == 0

    def test_booleans_and_none(self):
        assert to_number(True) == 1
        assert to_number(False) == 0
        assert to_number(None) == 0

    def test_unparsable(self):
        assert math.isnan(to_number("abc"))
        assert math.isnan(to_number("1_000"))
        assert math.isnan(to_number({"a": 1}))
        assert math.isnan(to_number([1, 2]))

    def test_single_item_list(self):
        assert to_number(["7"]) == 7
        assert to_number([]) == 0


@pytest.mark.unit
class TestRequestGate:
    """Origin and shared-secret decisions"""

    def test_unrestricted_origins(self):
        gate = RequestGate(allowed_origins=None)
        assert gate.is_origin_allowed("https://any.example.com")
        assert gate.cors_origins() == ["*"]

    def test_allow_list(self):
        gate = RequestGate(allowed_origins=["https://app.example.com"])
        assert gate.is_origin_allowed("https://app.example.com")
        assert not gate.is_origin_allowed("https://app.example.com.evil.io")
        assert gate.is_origin_allowed(None)
        assert gate.is_origin_allowed("")

    def test_open_mode(self):
        gate = RequestGate(client_api_key=None)
        assert not gate.requires_api_key("/generate-title")
        assert gate.is_api_key_valid(None)

    def test_empty_secret_means_open_mode(self):
        gate = RequestGate(client_api_key="")
        assert gate.is_api_key_valid(None)

    def test_secret_comparison(self):
        gate = RequestGate(client_api_key="s3cret")
        assert gate.is_api_key_valid("s3cret")
        assert not gate.is_api_key_valid("s3cret ")
        assert not gate.is_api_key_valid("")
        assert not gate.is_api_key_valid(None)

    def test_health_exempt(self):
        gate = RequestGate(client_api_key="s3cret")
        assert not gate.requires_api_key("/health")
        assert gate.requires_api_key("/calc-subs")

    def test_from_settings(self, settings_factory):
        settings = settings_factory(ALLOWED_ORIGINS="https://a.example.com, ,https://b.example.com", CLIENT_API_KEY="k")
        gate = RequestGate.from_settings(settings)
        assert gate.allowed_origins == ["https://a.example.com", "https://b.example.com"]
        assert gate.client_api_key == "k"


@pytest.mark.unit
class TestPromptManager:
    """Prompt catalogue"""

    def test_budgets_and_limits(self):
        manager = PromptManager()
        assert (manager.get_template("title").max_tokens, manager.get_template("title").limit) == (160, 10)
        assert (manager.get_template("name").max_tokens, manager.get_template("name").limit) == (200, 15)
        assert (manager.get_template("bio").max_tokens, manager.get_template("bio").limit) == (160, 5)

    def test_braces_in_values_are_literal(self):
        prompt = get_prompt_manager().build_prompt("name", keywords="{style}", style="short")
        assert "Keywords: {style}." in prompt

    def test_unknown_template(self):
        with pytest.raises(ValueError):
            PromptManager().get_template("poem")


@pytest.mark.unit
class TestSettings:
    """Environment settings"""

    def test_defaults(self, settings_factory):
        settings = settings_factory()
        assert settings.PORT == 8080
        assert settings.OPENAI_MODEL == "gpt-4o-mini"
        assert settings.get_allowed_origins() is None
        assert not settings.is_auth_enabled()

    def test_reads_environment(self, monkeypatch):
        from config.settings import Settings

        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example.com,https://b.example.com")
        monkeypatch.setenv("CLIENT_API_KEY", "abc")
        monkeypatch.setenv("PORT", "9000")
        settings = Settings(_env_file=None)
        assert settings.get_allowed_origins() == ["https://a.example.com", "https://b.example.com"]
        assert settings.is_auth_enabled()
        assert settings.PORT == 9000

    def test_warnings(self, settings_factory):
        warnings = settings_factory(AI_PROVIDER="llama").validate_settings()
        assert any("AI_PROVIDER" in warning for warning in warnings)
        assert any("OPENAI_API_KEY" in warning for warning in warnings)
        assert any("CLIENT_API_KEY" in warning for warning in warnings)

    def test_no_warnings_when_configured(self, settings_factory):
        settings = settings_factory(OPENAI_API_KEY="sk-x", CLIENT_API_KEY="k", ALLOWED_ORIGINS="https://a.example.com")
        assert settings.validate_settings() == []
        assert settings.get_current_provider_info()["status"] == "configured"


@pytest.mark.unit
class TestMockTextGenerator:
    """Offline canned lines"""

    def test_line_count_follows_prompt(self):
        text = MockTextGenerator().generate("Generate 15 creative Twitch usernames. Keywords: . Style: short.")
        lines = text.split("\n")
        assert len(lines) == 15
        assert len(set(lines)) == 15

    def test_kind_detection(self):
        text = MockTextGenerator().generate("Write 5 Twitch bio lines with vibe: chill.")
        assert text.split("\n")[0] == "Streaming good vibes and questionable aim."

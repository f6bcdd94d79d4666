from __future__ import annotations

import pytest

from capture_core import DEFAULT_BLOCKED_UA_STRS, UserAgentBlocklist, is_blocked_ua

CHROME_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/74.0.3729.157 Safari/537.36"
)


@pytest.mark.parametrize("bot_string", DEFAULT_BLOCKED_UA_STRS + ("testington",))
def test_blocks_a_bot_based_on_the_user_agent(bot_string: str, user_agent_for) -> None:
    user_agent = user_agent_for(bot_string)
    assert is_blocked_ua(user_agent, ["testington"]) is True


@pytest.mark.parametrize(
    "user_agent",
    [
        "Mozilla/5.0 AppleWebKit/537.36 (KHTML, like Gecko; compatible; Googlebot/2.1; "
        "+http://www.google.com/bot.html) Chrome/W.X.Y.Z Safari/537.36",
        "AhrefsSiteAudit (Desktop) - Mozilla/5.0 (compatible; AhrefsSiteAudit/6.1; +http://ahrefs.com/robot/)",
        "Mozilla/5.0 AppleWebKit/537.36 (KHTML, like Gecko; compatible; GPTBot/1.0; +https://openai.com/gptbot)",
    ],
)
def test_blocks_regardless_of_case(user_agent: str) -> None:
    assert is_blocked_ua(user_agent, []) is True
    assert is_blocked_ua(user_agent.lower(), []) is True
    assert is_blocked_ua(user_agent.upper(), []) is True


def test_custom_pattern_matches_in_any_case() -> None:
    assert is_blocked_ua("Mozilla/5.0 (TestingtonCrawl)", ["testington"]) is True
    assert is_blocked_ua("mozilla/5.0 (testingtoncrawl)", ["TESTINGTON"]) is True
    assert is_blocked_ua("Mozilla/5.0 (TestingtonCrawl)", []) is False


@pytest.mark.parametrize("user_agent", [None, ""])
def test_missing_user_agent_is_allowed(user_agent) -> None:
    assert is_blocked_ua(user_agent, ["testington"]) is False


def test_regular_browser_is_allowed() -> None:
    assert is_blocked_ua(CHROME_WINDOWS) is False
    assert is_blocked_ua(CHROME_WINDOWS, None) is False


def test_blank_custom_patterns_are_ignored() -> None:
    assert is_blocked_ua(CHROME_WINDOWS, ["", "   "]) is False


def test_blocklist_keeps_defaults_and_extras() -> None:
    blocklist = UserAgentBlocklist.build(["Testington"])

    assert len(blocklist.patterns) == len(DEFAULT_BLOCKED_UA_STRS) + 1
    assert "testington" in blocklist.patterns
    assert "bytespider;" in blocklist.patterns
    assert blocklist.matches("Mozilla/5.0 (compatible; Bytespider; spider-feedback@bytedance.com)")


def test_blocklist_accepts_custom_defaults() -> None:
    blocklist = UserAgentBlocklist.build(defaults=("internal-probe",))

    assert blocklist.matches("Internal-Probe/1.0")
    assert not blocklist.matches("Mozilla/5.0 (compatible; Googlebot/2.1)")

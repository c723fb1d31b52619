import pytest

from discord_relay.model import GitHubEvent
from discord_relay.pull_request import MERGED_COLOR, OPEN_COLOR, PullRequestHandler

from .conftest import DEV_WEBHOOK_URL, pull_request_payload


@pytest.fixture
def handler(mocker):
    notifier = mocker.Mock()
    notifier.send.return_value = True
    return PullRequestHandler(notifier, DEV_WEBHOOK_URL)


def event(**kwargs):
    return GitHubEvent.model_validate(pull_request_payload(**kwargs))


@pytest.mark.parametrize("action", ["opened", "reopened", "ready_for_review"])
def test_open_actions_notify_in_blue(handler, action):
    assert handler.handle(event(action=action))

    handler.notifier.send.assert_called_once()
    url, message = handler.notifier.send.call_args.args
    assert url == DEV_WEBHOOK_URL
    (embed,) = message.embeds
    assert embed.title == f"Pull Request {action}"
    assert embed.color == OPEN_COLOR == 0x1D82F7
    assert embed.url == "http://x/42"


def test_opened_message(handler):
    message = handler.build_message(event(action="opened"))

    (embed,) = message.embeds
    assert message.content == ""
    assert embed.description == "**alice** opened [#42: Fix bug](http://x/42)"
    assert [(f.name, f.value, f.inline) for f in embed.fields] == [
        ("Repository", "[org/repo](http://x)", True),
        ("PR Status", "open", True),
    ]


def test_merged(handler):
    message = handler.build_message(event(action="closed", merged=True, state="closed"))

    (embed,) = message.embeds
    assert embed.title == "Pull Request merged"
    assert embed.color == MERGED_COLOR == 0x6E48CD
    assert embed.description == "**alice** merged [#42: Fix bug](http://x/42)"
    assert embed.fields[1].value == "closed"


def test_closed_without_merge_is_dropped(handler):
    assert not handler.handle(event(action="closed", merged=False, state="closed"))
    handler.notifier.send.assert_not_called()


@pytest.mark.parametrize("action", ["edited", "synchronize", "labeled", ""])
def test_other_actions_are_dropped(handler, action):
    assert not handler.handle(event(action=action))
    handler.notifier.send.assert_not_called()


def test_delivery_failure_is_reported(handler):
    handler.notifier.send.return_value = False
    assert not handler.handle(event(action="opened"))

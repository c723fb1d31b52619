'''
This module decodes webhook payloads and routes them
to the handler of their event type.
'''

import logging

from pydantic import ValidationError

from discord_relay.config import Config
from discord_relay.model import GitHubEvent
from discord_relay.notifier import DiscordNotifier
from discord_relay.pull_request import PullRequestHandler
from discord_relay.workflow_run import WorkflowRunHandler

logger = logging.getLogger(__name__)


class PayloadError(Exception):
    '''
    Raised when a webhook payload can not be decoded
    '''
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


def decode_event(body: bytes) -> GitHubEvent:
    '''
    Given params:

    body: bytes, the raw request body,

    raise PayloadError if body is not a valid event payload.
    Otherwise return the decoded GitHubEvent.
    '''
    try:
        return GitHubEvent.model_validate_json(body)
    except ValidationError as error:
        logger.warning("Error parsing webhook payload: %s", error)
        raise PayloadError("Invalid JSON payload") from error


class Dispatcher():
    '''
    Dispatcher maps the X-GitHub-Event label to a handler.
    pull_request events go to the development channel,
    workflow_run events go to the testing channel.
    '''
    def __init__(self, config: Config, notifier: DiscordNotifier | None = None):
        if notifier is None:
            notifier = DiscordNotifier(timeout=config.notify_timeout)
        self.handlers = {
            "pull_request": PullRequestHandler(notifier, config.dev_webhook_url),
            "workflow_run": WorkflowRunHandler(notifier, config.test_webhook_url),
        }

    def dispatch(self, event_type: str | None, event: GitHubEvent) -> bool:
        '''
        Routes the event. Returns True if a notification was delivered.
        '''
        handler = self.handlers.get(event_type or "")
        if handler is None:
            logger.info("Ignoring unhandled event type: %s", event_type)
            return False
        return handler.handle(event)

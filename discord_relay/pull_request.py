'''
This is the module that turns pull_request events
into Discord notifications.
'''

import logging

from discord_relay.model import GitHubEvent
from discord_relay.notification import DiscordMessage, Embed, EmbedField
from discord_relay.notifier import DiscordNotifier

logger = logging.getLogger(__name__)

PULL_REQUEST_ACTIONS = ("opened", "reopened", "ready_for_review", "closed")

OPEN_COLOR = 0x1D82F7
MERGED_COLOR = 0x6E48CD


class PullRequestHandler():
    '''
    Notifies the development channel when a pull request is
    opened, reopened, marked ready for review or merged.
    '''
    def __init__(self, notifier: DiscordNotifier, webhook_url: str):
        self.notifier = notifier
        self.webhook_url = webhook_url

    def build_message(self, event: GitHubEvent) -> DiscordMessage | None:
        '''
        Returns the message for the event, or None if the
        event should not be notified.
        '''
        action = event.action
        pull_request = event.pull_request

        if action not in PULL_REQUEST_ACTIONS:
            logger.info("Ignoring PR action: %s", action)
            return None

        merged = action == "closed" and pull_request.merged
        if action == "closed" and not merged:
            logger.info("PR was closed without merging, not sending notification")
            return None

        color = MERGED_COLOR if merged else OPEN_COLOR
        label = "merged" if merged else action

        repository = event.repository
        embed = Embed(
            title=f"Pull Request {label}",
            description=(
                f"**{event.sender.login}** {label} "
                f"[#{pull_request.number}: {pull_request.title}]({pull_request.html_url})"
            ),
            color=color,
            url=pull_request.html_url,
            fields=(
                EmbedField(
                    name="Repository",
                    value=f"[{repository.full_name}]({repository.html_url})",
                    inline=True,
                ),
                EmbedField(name="PR Status", value=pull_request.state, inline=True),
            ),
        )
        return DiscordMessage(embeds=(embed,))

    def handle(self, event: GitHubEvent) -> bool:
        '''
        Builds the notification and sends it to the development channel.
        '''
        logger.info("Processing pull request event: %s", event.action)
        message = self.build_message(event)
        if message is None:
            return False
        return self.notifier.send(self.webhook_url, message)

'''
This is the module that turns workflow_run events
into Discord notifications.
'''

import logging

from discord_relay.model import GitHubEvent
from discord_relay.notification import DiscordMessage, Embed, EmbedField
from discord_relay.notifier import DiscordNotifier

logger = logging.getLogger(__name__)

CONCLUSION_COLORS = {
    "success": 0x2ECC71,
    "failure": 0xE74C3C,
    "cancelled": 0xF39C12,
    "skipped": 0x95A5A6,
}
UNKNOWN_COLOR = 0xE6E6E6


def conclusion_color(conclusion: str) -> int:
    return CONCLUSION_COLORS.get(conclusion, UNKNOWN_COLOR)


class WorkflowRunHandler():
    '''
    Notifies the testing channel when a workflow run completes.
    Queued and in progress runs are ignored.
    '''
    def __init__(self, notifier: DiscordNotifier, webhook_url: str):
        self.notifier = notifier
        self.webhook_url = webhook_url

    def build_message(self, event: GitHubEvent) -> DiscordMessage | None:
        if event.action != "completed":
            logger.info("Ignoring workflow run action: %s", event.action)
            return None

        run = event.workflow_run
        repository = event.repository
        sender = event.sender
        embed = Embed(
            title=f"Workflow Run {run.conclusion}",
            description=f"Workflow **{run.name}** {run.conclusion}",
            color=conclusion_color(run.conclusion),
            url=run.html_url,
            fields=(
                EmbedField(
                    name="Repository",
                    value=f"[{repository.full_name}]({repository.html_url})",
                    inline=True,
                ),
                EmbedField(
                    name="Triggered by",
                    value=f"[{sender.login}]({sender.html_url})",
                    inline=True,
                ),
            ),
        )
        return DiscordMessage(embeds=(embed,))

    def handle(self, event: GitHubEvent) -> bool:
        '''
        Builds the notification and sends it to the testing channel.
        '''
        logger.info("Processing workflow run event: %s", event.action)
        message = self.build_message(event)
        if message is None:
            return False
        return self.notifier.send(self.webhook_url, message)

'''
This module delivers messages to Discord channel webhooks.
'''

import logging

import requests
from pydantic_core import PydanticSerializationError

from discord_relay.notification import DiscordMessage

logger = logging.getLogger(__name__)


class DiscordNotifier():
    '''
    DiscordNotifier posts a DiscordMessage to a channel webhook.
    Delivery is best effort: every failure is logged, never raised,
    and nothing is retried.
    '''
    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def send(self, webhook_url: str, message: DiscordMessage) -> bool:
        '''
        Given params:

        webhook_url: str,
        message: DiscordMessage,

        return True if Discord accepted the message.
        '''
        try:
            payload = message.to_json()
        except PydanticSerializationError as error:
            logger.error("Error marshaling Discord message: %s", error)
            return False

        try:
            response = requests.post(
                webhook_url,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except (requests.RequestException, ValueError) as error:
            logger.error("Error sending Discord message: %s", error)
            return False

        if not 200 <= response.status_code < 300:
            logger.error(
                "Discord API error (status %d): %s",
                response.status_code,
                response.text,
            )
            return False

        logger.info("Discord message sent successfully")
        return True

'''
Relay GitHub webhook events to Discord channel webhooks.
'''

__version__ = "0.1.0"

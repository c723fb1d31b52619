'''
This module is the data model used
to parse the Github Webhook payloads.
'''

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Payload(BaseModel):
    '''
    Base class of the payload models.
    Every field is optional: missing keys and JSON nulls
    fall back to the field's zero value.
    '''
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Repository(Payload):
    '''
    Repository sub class of GitHubEvent.
    '''
    full_name: str = ""
    html_url: str = ""


class Sender(Payload):
    '''
    Sender sub class of GitHubEvent.
    We are only interested in who the sender is and
    where their profile lives.
    '''
    login: str = ""
    html_url: str = ""


class PullRequest(Payload):
    '''
    PullRequest sub class of GitHubEvent.
    Zero valued unless the event is a pull_request event.
    '''
    number: int = 0
    title: str = ""
    html_url: str = ""
    merged: bool = False
    state: str = ""


class WorkflowRun(Payload):
    '''
    WorkflowRun sub class of GitHubEvent.
    Zero valued unless the event is a workflow_run event.
    '''
    name: str = ""
    status: str = ""
    conclusion: str = ""
    html_url: str = ""


class GitHubEvent(Payload):
    '''
    GitHubEvent is the model representing webhook
    payload data from Github Webhook.
    '''
    action: str = ""
    repository: Repository = Field(default_factory=Repository)
    sender: Sender = Field(default_factory=Sender)
    pull_request: PullRequest = Field(default_factory=PullRequest)
    workflow_run: WorkflowRun = Field(default_factory=WorkflowRun)

"""Errors raised while reading a Dialogflow webhook request."""


class WebhookError(Exception):
    """Base error for webhook processing."""


class MalformedRequestError(WebhookError):
    """The request body does not have the shape Dialogflow sends."""

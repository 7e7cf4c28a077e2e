"""Slack status provider."""

from whatsup.providers.slack.response import API_URL
from whatsup.providers.slack.response import PAGE_URL
from whatsup.providers.slack.response import SERVICE_NAME
from whatsup.providers.slack.response import Incident
from whatsup.providers.slack.response import Note
from whatsup.providers.slack.response import SlackResponse
from whatsup.providers.slack.response import decode_slack

__all__ = [
    "API_URL",
    "PAGE_URL",
    "SERVICE_NAME",
    "Incident",
    "Note",
    "SlackResponse",
    "decode_slack",
]

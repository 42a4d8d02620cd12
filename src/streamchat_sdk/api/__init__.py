"""Endpoint groups exposed on :class:`streamchat_sdk.Client`."""

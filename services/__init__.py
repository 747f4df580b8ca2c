"""
Services

The monitoring pipeline and the Telegram notifier.
"""

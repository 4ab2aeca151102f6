"""Adapters that connect the docsref core to Telegram, HTTP and HTML parsing."""

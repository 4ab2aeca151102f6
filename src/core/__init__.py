"""Core domain package for docsref.

Core contains reference parsing, URL building, title extraction and the
expansion pipeline without any Telegram, HTTP or HTML-parser specific code,
keeping the business logic portable.
"""

"""Application keys for type-safe app configuration access."""

from aiohttp import web

from fbws.core.pages import PageSet

pages_key = web.AppKey("pages", PageSet)

"""Session factory using Factory Pattern."""
import requests
import aiohttp

from ..config import APIConfig


class SessionFactory:
    """Factory for creating HTTP sessions with a persistent cookie jar."""
    
    @staticmethod
    def create_sync_session(config: APIConfig) -> requests.Session:
        """Creates a synchronous HTTP session."""
        session = requests.Session()
        session.headers.update(config.get_session_headers())
        return session
    
    @staticmethod
    async def create_async_session(config: APIConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session."""
        return aiohttp.ClientSession(
            cookie_jar=aiohttp.CookieJar(unsafe=True),
            **config.get_aiohttp_session_kwargs()
        )

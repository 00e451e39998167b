"""
Async usage - Same handshake with aiohttp
"""
import asyncio

from pysbss import AsyncAPIClient, APIConfig, AuthRequest


URL = "https://crm.example.com/index.php"


async def main():
    config = APIConfig(user_agent="crm-sync/1.0", timeout=30.0)
    
    async with AsyncAPIClient(config) as client:
        await client.login(URL, AuthRequest.create("user1", "password1"))
        print(f"Authorized: {client.authorized}")


if __name__ == "__main__":
    asyncio.run(main())

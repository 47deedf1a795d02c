"""Example showing session injection for Home Assistant integration."""

import asyncio

from aiohttp import ClientSession

from pytuyalights import TuyaLightsClient


async def main() -> None:
    """Demonstrate session injection pattern for HA integration."""
    async with ClientSession() as session:
        print("Using application-managed aiohttp session")

        # Client will use the provided session instead of creating its own
        client = TuyaLightsClient(
            username="your@email.com",
            password="your_password",
            session=session,  # Inject existing session
        )

        async with client:
            lights = await client.discover()
            print(f"Found {len(lights)} light(s) using injected session")

            # Several commands can run at once on the same client
            await asyncio.gather(*(client.turn_off(light) for light in lights))

        # Session remains open after client exits
        print("\nClient closed, but session still available for other requests")


if __name__ == "__main__":
    asyncio.run(main())

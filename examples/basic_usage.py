"""Basic usage example for pytuyalights library."""

import asyncio

from pytuyalights import HsbColor, TuyaLightsClient


async def main() -> None:
    """Demonstrate basic usage of pytuyalights."""
    # Initialize client with credentials
    async with TuyaLightsClient(
        username="your@email.com",
        password="your_password",
    ) as client:
        print("Connected to Tuya cloud")

        # Get all lights
        lights = await client.discover()
        print(f"Found {len(lights)} light(s)")

        for light in lights:
            print(f"\nLight: {light.name}")
            print(f"  ID: {light.id}")
            if light.status is not None:
                print(f"  Online: {light.status.online}")
                print(f"  On: {light.status.is_on}")

            print("Turning light on...")
            await client.turn_on(light)

            print("Setting brightness to 50%...")
            await client.set_brightness(light, 128)

            print("Setting color (green)...")
            await client.set_color(light, HsbColor(hue=120, saturation=100, brightness=100))

            print("Setting warm white...")
            await client.set_color_temperature(light, 2700)

            status = await client.query_device(light)
            print(f"Current mode: {status.color_mode}")


if __name__ == "__main__":
    asyncio.run(main())

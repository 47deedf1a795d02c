"""Example caching the access token and device list between runs.

Reads TUYA_USER, TUYA_PASSWORD and TUYA_LIGHT_NAME from the environment. The
first run logs in and discovers lights; later runs reuse the saved files.
"""

import asyncio
import os
from pathlib import Path

from pytuyalights import (
    HsbColor,
    TuyaLightsClient,
    find_lights,
    load_access_token,
    load_lights,
    save_access_token,
    save_lights,
)


TOKEN_PATH = Path("access_token")
DEVICES_PATH = Path("devices.json")


async def main() -> None:
    """Turn the named light off using cached session state."""
    if TOKEN_PATH.exists():
        client = TuyaLightsClient.from_token(load_access_token(TOKEN_PATH))
    else:
        client = TuyaLightsClient(username=os.environ["TUYA_USER"], password=os.environ["TUYA_PASSWORD"])

    async with client:
        if not TOKEN_PATH.exists():
            save_access_token(TOKEN_PATH, client.dump_token())

        if DEVICES_PATH.exists():
            lights = load_lights(DEVICES_PATH)
        else:
            lights = await client.discover()
            save_lights(DEVICES_PATH, lights)

        for light in find_lights(lights, os.environ["TUYA_LIGHT_NAME"]):
            await client.set_color(light, HsbColor(hue=0, saturation=0, brightness=0))
            print(f"Dimmed {light.name} ({light.id})")


if __name__ == "__main__":
    asyncio.run(main())

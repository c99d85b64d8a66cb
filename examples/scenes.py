# pylint: disable=W0621
"""Asynchronous Python client for the LIFX cloud API."""

import asyncio

from lifx_cloud import LIFX, State


async def main() -> None:
    """Show example on activating a scene stored in your LIFX account."""
    async with LIFX.from_env() as lifx:
        scenes = await lifx.scenes().list().send()
        for scene in scenes:
            print(scene.uuid, scene.name)

        if scenes:
            print(f"Activating {scenes[0].name}....")
            await (
                lifx.scenes()
                .activate(scenes[0])
                .transition(5)
                .ignore("power")
                .overrides(State(brightness=0.5))
                .retries(2)
                .send()
            )


if __name__ == "__main__":
    asyncio.run(main())

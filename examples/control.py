# pylint: disable=W0621
"""Asynchronous Python client for the LIFX cloud API."""

import asyncio

from lifx_cloud import LIFX, NamedColor, Selector


async def main() -> None:
    """Show example on controlling your LIFX lights."""
    async with LIFX.from_env() as lifx:
        lights = await lifx.select(Selector.all()).list().send()
        for light in lights:
            print(light.label, light.power, light.brightness)

        if any(light.power for light in lights):
            print("Turning off LIFX....")
            await lifx.select(Selector.all()).set_state().power(False).send()
        else:
            print("Turning on LIFX....")
            results = (
                await lifx.select(Selector.all())
                .set_state()
                .power(True)
                .color(NamedColor.ORANGE)
                .brightness(0.4)
                .duration(2)
                .send()
            )
            print(results)


if __name__ == "__main__":
    asyncio.run(main())

"""Protean Engine runner for the products domain.

Only needed when the active overlay sets ``event_processing = "async"``
(production): the Engine then delivers product change notifications to the
change log projector outside the request cycle.

Usage:
    PROTEAN_ENV=production python src/server.py
"""

import asyncio

from protean.server.engine import Engine


async def run():
    from products.domain import products

    products.init()
    await Engine(products).run()


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()

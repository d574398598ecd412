from __future__ import annotations

import logging

from fastmcp import FastMCP

from au_postcode_mcp.app.container import build_container
from au_postcode_mcp.app.logger import configure_logging
from au_postcode_mcp.tools.address_tools import register_address_tools

configure_logging()
log = logging.getLogger(__name__)

mcp = FastMCP("au-postcode-mcp")

try:
    _container = build_container()
    register_address_tools(mcp, _container)
    log.info("Address tools registered successfully")
except Exception as e:
    log.error("Failed to register address tools: %s", e, exc_info=True)
    raise


def main() -> None:
    mcp.run(
        transport="http",
        host="127.0.0.1",
        port=3334,
        path="/mcp",
    )


if __name__ == "__main__":
    main()

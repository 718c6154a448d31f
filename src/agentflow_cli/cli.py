"""Console script entrypoint.

The CLI itself is implemented in `agentflow_cli.marketplace.main`.
"""

from __future__ import annotations

from agentflow_cli.marketplace.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())

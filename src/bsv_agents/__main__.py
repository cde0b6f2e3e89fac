"""Entry point for running the installer as a module."""

from __future__ import annotations

from bsv_agents.cli import main

if __name__ == "__main__":
    main(prog_name="bsv-claude-agents")

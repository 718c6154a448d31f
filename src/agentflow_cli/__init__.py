"""AgentFlow CLI.

An interactive terminal menu for the AgentFlow workflow marketplace:
- search, browse by category and list workflows
- view workflow details and catalog statistics
- simulated workflow installs
"""

__version__ = "1.0.0"

from agentflow_cli.marketplace.config import AgentFlowSettings

__all__ = ["__version__", "AgentFlowSettings"]

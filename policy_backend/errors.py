"""Exception types raised by the policy advisor core."""

from __future__ import annotations


class PolicyAdvisorError(Exception):
    """Base class for every error the advisor reports to its callers."""


class NetworkError(PolicyAdvisorError):
    """The policy page could not be fetched (timeout, transport or HTTP status)."""


class UnknownToolError(PolicyAdvisorError):
    """A caller asked for an operation that is not registered."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")

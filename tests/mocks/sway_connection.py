"""Mock Sway IPC connection for isolated testing.

Provides a mock container tree and command replies without requiring Sway.
"""

from typing import List, Optional
from dataclasses import dataclass, field


@dataclass
class MockCon:
    """Mock Sway container node."""
    id: int
    name: Optional[str] = None
    nodes: List["MockCon"] = field(default_factory=list)
    floating_nodes: List["MockCon"] = field(default_factory=list)

    def descendants(self) -> List["MockCon"]:
        """All containers below this one."""
        result = []
        for child in self.nodes + self.floating_nodes:
            result.append(child)
            result.extend(child.descendants())
        return result


@dataclass
class MockCommandReply:
    """Mock reply to a Sway command."""
    success: bool = True
    error: Optional[str] = None


class MockSwayConnection:
    """Mock Sway IPC connection."""

    def __init__(self, tree: Optional[MockCon] = None):
        """Initialize mock connection.

        Args:
            tree: Tree returned by get_tree (defaults to an empty root)
        """
        self.tree = tree or MockCon(id=1, name="root")
        self.commands_executed: List[str] = []
        self.replies: List[MockCommandReply] = [MockCommandReply()]
        self.command_error: Optional[Exception] = None
        self.tree_error: Optional[Exception] = None
        self.quit = False

    async def get_tree(self) -> MockCon:
        """Get the container tree."""
        if self.tree_error:
            raise self.tree_error
        return self.tree

    async def command(self, cmd: str) -> List[MockCommandReply]:
        """Execute Sway command.

        Args:
            cmd: Sway command string

        Returns:
            Configured command replies
        """
        self.commands_executed.append(cmd)
        if self.command_error:
            raise self.command_error
        return self.replies

    def main_quit(self) -> None:
        """Close the connection."""
        self.quit = True

"""Mount controller and mount-tool selection."""

from .controller import MountController, listing_contains, tool_for_filesystem

__all__ = ["MountController", "listing_contains", "tool_for_filesystem"]

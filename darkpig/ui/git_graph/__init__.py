"""Git graph visualization components."""

from darkpig.ui.git_graph.widget import GitGraphView

__all__ = ["GitGraphView"]

"""Declarative validation flows — JSON-defined validator trees."""

from validflow.validators.flows.loader import FlowDefinition, GroupNode, RuleNode, build_tree, load_flows

__all__ = ["FlowDefinition", "GroupNode", "RuleNode", "build_tree", "load_flows"]
